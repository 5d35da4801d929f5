class Book:
    """Represents a single book item in the library."""

    def __init__(self, title: str, borrowed: bool = False) -> None:
        self._title = title
        self.borrowed = borrowed

    @property
    def title(self) -> str:
        return self._title

    def borrow(self) -> None:
        # Unguarded; Catalog.borrow_book checks the current state first.
        self.borrowed = True

    def return_(self) -> None:
        self.borrowed = False

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        state = "borrowed" if self.borrowed else "available"
        return f"{self.title} ({state})"

    def __repr__(self) -> str:
        return f"Book(title={self.title!r}, borrowed={self.borrowed!r})"

    def to_dict(self) -> dict:
        return {"title": self.title, "borrowed": self.borrowed}
