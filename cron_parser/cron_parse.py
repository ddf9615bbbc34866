"""Cron expression parser.

Supported field syntax:
- "*"        -> every value of the field
- "5"        -> a single value (must lie within the field bounds)
- "1-5"      -> inclusive range
- "*/15"     -> every 15th value over the whole field
- "10-20/2"  -> every 2nd value from 10 to 20
- "5/10"     -> every 10th value from 5 to the field maximum
- "1,5-7,*/20" -> any comma-separated combination of the above

Values produced by range and step forms that fall outside the field bounds
are dropped; a bare value outside the bounds is an error.
"""

import re
from dataclasses import dataclass

from loguru import logger

from cron_parser.fields import COMMAND_LABEL, FIELD_SPECS, FieldSpec, format_label

_INT_RE = re.compile(r"-?\d+")

EXPRESSION_FORMAT = "<minute> <hour> <day of month> <month> <day of week> <command>"


class CronParseError(Exception):
    pass


class InvalidValueError(CronParseError):
    pass


class OutOfRangeError(CronParseError):
    def __init__(self, value: int, min_val: int, max_val: int) -> None:
        super().__init__(f"Value {value} out of range [{min_val}-{max_val}]")
        self.value = value
        self.min_val = min_val
        self.max_val = max_val


class InvalidRangeError(CronParseError):
    pass


class InvalidStepError(CronParseError):
    pass


class MalformedExpressionError(CronParseError):
    def __init__(self, token_count: int) -> None:
        super().__init__(
            f"Invalid cron expression. Expected at least 6 fields, got {token_count}. "
            f"Format: {EXPRESSION_FORMAT}"
        )
        self.token_count = token_count


@dataclass
class ExpandedField:
    spec: FieldSpec
    values: list[int]


@dataclass
class ParsedCron:
    fields: list[ExpandedField]
    command: str


def _to_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def _parse_range(text: str) -> tuple[int, int] | None:
    start_str, _, end_str = text.partition("-")
    start, end = _to_int(start_str), _to_int(end_str)
    if start is None or end is None:
        return None
    return start, end


def _expand_step(part: str, min_val: int, max_val: int) -> list[int]:
    range_part, step_str = part.split("/", 1)
    step = _to_int(step_str)
    if step is None or step <= 0:
        raise InvalidStepError(f"Invalid step value: {step_str}")

    if range_part == "*":
        start, end = min_val, max_val
    elif "-" in range_part:
        bounds = _parse_range(range_part)
        if bounds is None:
            raise InvalidRangeError(f"Invalid range in step expression: {range_part}")
        start, end = bounds
    else:
        start = _to_int(range_part)
        if start is None:
            raise InvalidValueError(f"Invalid value in step expression: {range_part}")
        end = max_val

    # Clamp to the field window, keeping start on the step grid
    if start < min_val:
        start += -(-(min_val - start) // step) * step
    end = min(end, max_val)
    return list(range(start, end + 1, step))


def _expand_range(part: str, min_val: int, max_val: int) -> list[int]:
    bounds = _parse_range(part)
    if bounds is None:
        raise InvalidRangeError(f"Invalid range: {part}")
    start, end = bounds
    if start > end:
        raise InvalidRangeError(f"Invalid range: start ({start}) > end ({end})")
    return list(range(max(start, min_val), min(end, max_val) + 1))


def parse_field(field: str, min_val: int, max_val: int) -> list[int]:
    """Expand one cron field into the sorted list of values it matches."""
    values: set[int] = set()

    for part in field.split(","):
        if "/" in part:
            values.update(_expand_step(part, min_val, max_val))
        elif part.find("-") > 0:
            values.update(_expand_range(part, min_val, max_val))
        elif part == "*":
            values.update(range(min_val, max_val + 1))
        else:
            val = _to_int(part)
            if val is None:
                raise InvalidValueError(f"Invalid value: {part}")
            if val < min_val or val > max_val:
                raise OutOfRangeError(val, min_val, max_val)
            values.add(val)

    return sorted(values)


def parse_cron(expression: str) -> ParsedCron:
    """Split a cron line into its five time fields and command, expanding each field.

    The first field that fails to parse aborts the whole expression.
    """
    parts = expression.split()
    if len(parts) < 6:
        raise MalformedExpressionError(len(parts))

    command = " ".join(parts[5:])
    fields = []
    for token, spec in zip(parts[:5], FIELD_SPECS):
        values = parse_field(token, spec.min, spec.max)
        logger.debug(f"{spec.name}: {token!r} -> {len(values)} value(s)")
        fields.append(ExpandedField(spec=spec, values=values))

    return ParsedCron(fields=fields, command=command)


def format_report(parsed: ParsedCron) -> str:
    lines = [format_label(f.spec.name) + " ".join(str(v) for v in f.values) for f in parsed.fields]
    lines.append(format_label(COMMAND_LABEL) + parsed.command)
    return "\n".join(lines)


def expand_cron(expression: str) -> str:
    return format_report(parse_cron(expression))
