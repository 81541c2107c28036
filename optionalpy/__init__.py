from .optional import Optional, EMPTY, NO_VALUE_MESSAGE
from .errors import OptionalError, NullArgumentError, NoValuePresentError
from .object_utils import (
    is_null_or_undefined,
    is_not_null_or_undefined,
    require_non_null,
    require_non_empty,
    DEFAULT_NULL_MESSAGE,
    DEFAULT_EMPTY_MESSAGE,
)
from .string_utils import is_null_or_empty, is_not_null_or_empty
from .array_utils import is_null_or_empty_array, is_not_null_or_empty_array
from .function_types import Consumer, Producer, Callback, Predicate, Function, nop_callback
from .logger import ConsoleLogger
