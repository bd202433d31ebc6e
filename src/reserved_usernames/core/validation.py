from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class ValidationRules:
    """Caller-supplied username constraints. `None` fields are not checked."""

    min_length: int | None = None
    max_length: int | None = None
    # Body of a regex character class, e.g. "a-zA-Z0-9_".
    allowed_chars: str | None = None
    forbidden_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("min_length", "max_length"):
            v = getattr(self, name)
            if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
                raise InvalidArgumentError(f"{name} must be an integer, got {type(v).__name__}")
        if self.allowed_chars is not None and not isinstance(self.allowed_chars, str):
            raise InvalidArgumentError(f"allowed_chars must be a string, got {type(self.allowed_chars).__name__}")
        patterns = self.forbidden_patterns
        if isinstance(patterns, str):
            patterns = (patterns,)
        if not isinstance(patterns, (list, tuple)):
            raise InvalidArgumentError(f"forbidden_patterns must be a list of strings, got {type(patterns).__name__}")
        for p in patterns:
            if not isinstance(p, str):
                raise InvalidArgumentError(f"forbidden_patterns must be strings, got {type(p).__name__}")
        object.__setattr__(self, "forbidden_patterns", tuple(patterns))

    @classmethod
    def from_any(cls, value: Any) -> "ValidationRules":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidArgumentError(f"rules must be a mapping or ValidationRules, got {type(value).__name__}")

        def pick(snake: str, camel: str) -> Any:
            return value[snake] if snake in value else value.get(camel)

        return cls(
            min_length=pick("min_length", "minLength"),
            max_length=pick("max_length", "maxLength"),
            allowed_chars=pick("allowed_chars", "allowedChars"),
            forbidden_patterns=pick("forbidden_patterns", "forbiddenPatterns") or (),
        )


@dataclass(frozen=True)
class ValidationResult:
    username: Any
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"username": self.username, "isValid": self.is_valid, "errors": list(self.errors)}


def _compile(pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidArgumentError(f"Invalid pattern {pattern!r}: {e}") from e


def validate_username(name: Any, rules: ValidationRules, is_reserved: Callable[[Any], bool]) -> ValidationResult:
    if not isinstance(name, str):
        return ValidationResult(username=name, errors=["Username must be a string"])

    errors: list[str] = []

    if is_reserved(name):
        errors.append("Username is reserved")

    if rules.min_length is not None and len(name) < rules.min_length:
        errors.append(f"Username must be at least {rules.min_length} characters")

    if rules.max_length is not None and len(name) > rules.max_length:
        errors.append(f"Username must be at most {rules.max_length} characters")

    if rules.allowed_chars:
        if _compile(f"[{rules.allowed_chars}]+").fullmatch(name) is None:
            errors.append("Username contains invalid characters")

    for pattern in rules.forbidden_patterns:
        if _compile(pattern, re.IGNORECASE).search(name):
            errors.append(f"Username matches forbidden pattern: {pattern}")

    return ValidationResult(username=name, errors=errors)
