"""Progress reporting for batch conversions.

Gives console feedback while a CSV column is converted row by row.
"""


class ProgressPrinter:
    """Single-line progress counter for console output.

    Each call to advance() moves the counter one item forward and rewrites
    the line in place, so the caller never tracks the position itself.

    Attributes:
        task_name: Label shown before the counter
        total: Number of items expected
        current: Number of items reported so far

    Example:
        >>> progress = ProgressPrinter("Converting rows", 3)
        >>> for row in ["XIV", "4000", "IIII"]:
        ...     progress.advance()
        >>> progress.done()
        Converting rows...Done!
    """

    def __init__(self, task_name: str, total: int):
        self.task_name = task_name
        self.total = total
        self.current = 0

    def advance(self, step: int = 1) -> None:
        """Count `step` more items and show "Task...current/total"."""
        self.current = min(self.current + step, self.total)
        print(f"{self.task_name}...{self.current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        """Print the final line, padded over leftover counter digits."""
        line = f"{self.task_name}...Done!".ljust(len(f"{self.task_name}...{self.total}/{self.total}"))
        print(line)
