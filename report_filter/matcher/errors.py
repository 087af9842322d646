# report_filter/matcher/errors.py

from typing import Optional


class FilterError(Exception):
    """Base class for request filter errors."""
    pass


class InvalidPatternError(FilterError):
    """A filter pattern was rejected by one of the matching engines."""
    def __init__(self, message: str, pattern: str, engine: str, position: Optional[int] = None):
        self.message = message
        self.pattern = pattern
        self.engine = engine
        self.position = position
        text = f"Invalid pattern '{pattern}' for {engine}: {message}"
        if position is not None:
            text += f"\nAt position {position}:\n{self._get_error_context()}"
        super().__init__(text)

    def _get_error_context(self) -> str:
        """Get error context with pointer to error position."""
        start = max(0, self.position - 20)
        end = min(len(self.pattern), self.position + 20)
        context = self.pattern[start:end]
        pointer = " " * (self.position - start) + "^"
        return f"{context}\n{pointer}"


class CaptureGroupOutOfRange(FilterError, IndexError):
    """
    A replacement asked for a capturing group the pattern does not have.

    Signals a misconfigured merge rule, so it is never swallowed by the filter.
    """
    def __init__(self, group_index: int, text: str, pattern: str):
        self.group_index = group_index
        self.text = text
        self.pattern = pattern
        super().__init__(
            f"No matching group {group_index} for input string '{text}' and pattern '{pattern}'"
        )


class UnknownFilterTypeError(FilterError, ValueError):
    """No request filter is registered for the given type code."""
    def __init__(self, type_code: str, known_codes):
        self.type_code = type_code
        self.known_codes = sorted(known_codes)
        super().__init__(
            f"Unknown request filter type '{type_code}', expected one of: {', '.join(self.known_codes)}"
        )


class CaptureUnavailableError(CaptureGroupOutOfRange):
    """
    The automaton accepted the text but the full matcher produced no capture.

    The two engines disagree about the pattern, so no group can be extracted
    even though the pattern defines it.
    """
    def __init__(self, group_index: int, text: str, pattern: str):
        self.group_index = group_index
        self.text = text
        self.pattern = pattern
        FilterError.__init__(
            self,
            f"No capture available for group {group_index}: pattern '{pattern}' accepted "
            f"input string '{text}' in the automaton stage but not in the full match"
        )
