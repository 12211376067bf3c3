from __future__ import annotations


class BootstrapError(RuntimeError):
    """Base class for failures that abort a bootstrap run."""


class NoMatchError(BootstrapError):
    def __init__(self, what: str, query: str):
        super().__init__(f"No {what} matches '{query}'")
        self.what = what
        self.query = query


class SelectionUnavailable(BootstrapError):
    def __init__(self, prompt: str, options: list[str]):
        listed = ", ".join(options)
        super().__init__(
            f"{prompt} Several candidates match ({listed}); "
            "run interactively or use a more specific name."
        )
        self.options = list(options)


class SelectionCancelled(BootstrapError):
    pass
