"""Field configuration for cron-parser-cli."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldSpec:
    name: str
    min: int
    max: int


FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec("minute", 0, 59),
    FieldSpec("hour", 0, 23),
    FieldSpec("day of month", 1, 31),
    FieldSpec("month", 1, 12),
    FieldSpec("day of week", 0, 6),  # 0 = Sunday
)

LABEL_WIDTH = 14
COMMAND_LABEL = "command"


def format_label(label: str) -> str:
    return label.ljust(LABEL_WIDTH)
