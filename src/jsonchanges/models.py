from enum import Enum

from attrs import field, frozen


class IndexGapPolicy(Enum):
    """What a set does when its index lies past the end of a list."""

    PAD = "pad"  # extend the list with None up to the index
    IGNORE = "ignore"  # leave the list untouched


@frozen
class ApplyOptions:
    """Tuning knobs for path resolution and change application.

    Attributes:
      - separator: delimiter used to split string paths into segments.
      - index_gap: behaviour for list writes beyond the current length.
      - copy_values: clone values written by set changes so the result never
        shares containers with the caller's change records.
    """

    separator: str = field(default=".")
    index_gap: IndexGapPolicy = IndexGapPolicy.PAD
    copy_values: bool = True

    @separator.validator
    def _check_separator(self, attribute, value):
        if not isinstance(value, str) or not value:
            raise ValueError(f"{attribute.name} must be a non-empty string, got {value!r}")


DEFAULT_OPTIONS = ApplyOptions()
