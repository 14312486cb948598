from .path import Path, ErrorMessage
from .validation import (
    Validation,
    Valid,
    Invalid,
    valid,
    invalid,
    invalid_from,
    narrow,
    narrow_super,
    sequence,
)
from .combinators import (
    map_n,
    flat_map_n,
    map2, map3, map4, map5, map6, map7, map8,
    flat_map2, flat_map3, flat_map4, flat_map5, flat_map6, flat_map7, flat_map8,
)
from .rule import Rule
from .api import validate_that, validate_all, ValidationDSL, ValidateAllDSL
from .errors import ValidationException
from .logger import ConsoleLogger, default_logger, set_default_logger
