"""Password — length bounds plus per-character-class minimum counts."""

import re

from pydantic import Field

from fieldtypes.validators.base import BaseValidator, LengthConfig
from fieldtypes.validators.models import CharacterClass, PasswordRule

DEFAULT_RULES = (
    PasswordRule(char_class=CharacterClass.LOWERCASE, pattern=r"[a-z]", minimum=2),
    PasswordRule(char_class=CharacterClass.UPPERCASE, pattern=r"[A-Z]", minimum=2),
    PasswordRule(char_class=CharacterClass.NUMERIC, pattern=r"[0-9]", minimum=2),
    PasswordRule(char_class=CharacterClass.SPECIAL, pattern=r"[@!\-_#.,$()]", minimum=2),
)


class PasswordConfig(LengthConfig):
    min_length: int = Field(default=8, ge=0)
    max_length: int = Field(default=255, ge=0)
    # Replaces the default rule set entirely when overridden
    rules: tuple[PasswordRule, ...] = DEFAULT_RULES


class PasswordValidator(BaseValidator):
    """Checks password strength.

    Every rule is evaluated on its own; a password short on several classes
    reports one REQUIRES_MIN_<N>_<CLASS> code per class.
    """

    config_model = PasswordConfig

    @property
    def name(self) -> str:
        return "Password"

    def check(self, value: str, config: PasswordConfig) -> list:
        errors = self._check_length(value, config)

        for rule in config.rules:
            occurrences = len(re.findall(rule.pattern, value))
            if occurrences < rule.minimum:
                errors.append(rule.error_code)

        return errors


password_validator = PasswordValidator()
