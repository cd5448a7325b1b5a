"""In-memory text input target."""


class TextDocument:
    """Text field that keys insert into."""

    def __init__(self, text: str = "") -> None:
        self._chars: list[str] = list(text)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def insert_text(self, text: str) -> None:
        self._chars.extend(text)

    def delete_backward(self) -> None:
        """Delete the character before the cursor, if any."""
        if self._chars:
            self._chars.pop()

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"TextDocument({self.text!r})"
