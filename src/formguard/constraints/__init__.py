"""
Built-in constraints for formguard.

Each constraint is a declarative rule paired with a validator named
``<Constraint>Validator``. Validators never raise for invalid values; they
report violations through the execution context.

Organization by concern:
- basic: presence, booleans and types
- comparison: numeric ranges and string lengths
- pattern: regular expressions, emails and URLs
- choice: fixed sets of values
- file: uploaded files
- composite: All (per-element) and Valid (cascade)
"""

from formguard.constraints.basic import (
    Blank,
    BlankValidator,
    IsFalse,
    IsFalseValidator,
    IsTrue,
    IsTrueValidator,
    NotBlank,
    NotBlankValidator,
    NotNull,
    NotNullValidator,
    Type,
    TypeValidator,
)
from formguard.constraints.choice import Choice, ChoiceValidator
from formguard.constraints.comparison import (
    Max,
    MaxLength,
    MaxLengthValidator,
    MaxValidator,
    Min,
    MinLength,
    MinLengthValidator,
    MinValidator,
)
from formguard.constraints.composite import All, AllValidator, Valid, ValidValidator
from formguard.constraints.file import File, FileValidator
from formguard.constraints.pattern import (
    Email,
    EmailValidator,
    Regex,
    RegexValidator,
    Url,
    UrlValidator,
)

BUILTIN_VALIDATORS = {
    validator.__name__: validator
    for validator in (
        NotNullValidator,
        NotBlankValidator,
        BlankValidator,
        IsTrueValidator,
        IsFalseValidator,
        TypeValidator,
        MinValidator,
        MaxValidator,
        MinLengthValidator,
        MaxLengthValidator,
        RegexValidator,
        EmailValidator,
        UrlValidator,
        ChoiceValidator,
        FileValidator,
        AllValidator,
        ValidValidator,
    )
}

__all__ = [
    # Presence and types
    "NotNull",
    "NotBlank",
    "Blank",
    "IsTrue",
    "IsFalse",
    "Type",
    # Ranges and lengths
    "Min",
    "Max",
    "MinLength",
    "MaxLength",
    # Patterns
    "Regex",
    "Email",
    "Url",
    # Sets and files
    "Choice",
    "File",
    # Composition
    "All",
    "Valid",
    # Validator lookup
    "BUILTIN_VALIDATORS",
]
