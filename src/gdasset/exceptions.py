"""Custom exceptions for gdasset."""


class GDAssetError(Exception):
    """Base exception for all gdasset errors."""

    pass


class ReferenceKeywordError(GDAssetError):
    """Raised when a resource reference uses an unknown call keyword."""

    def __init__(self, keyword: str) -> None:
        super().__init__(
            f"Unknown resource keyword {keyword!r}: expected ExtResource or SubResource"
        )
        self.keyword = keyword


class LineOutOfRangeError(GDAssetError):
    """Raised when a document line is requested outside the document."""

    def __init__(self, line: int, line_count: int) -> None:
        super().__init__(f"Line {line} is outside the document (0..{line_count - 1})")
        self.line = line
        self.line_count = line_count
