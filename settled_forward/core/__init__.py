"""settled_forward.core — fixed-point numerics, result values and errors."""

from settled_forward.core.errors import (
    ErrorKind as ErrorKind,
)
from settled_forward.core.errors import (
    GenericError as GenericError,
)
from settled_forward.core.errors import (
    InvalidInputError as InvalidInputError,
)
from settled_forward.core.errors import (
    MathError as MathError,
)
from settled_forward.core.errors import (
    SettlementError as SettlementError,
)
from settled_forward.core.fixed_point import (
    FIXED_POINT_CONTEXT as FIXED_POINT_CONTEXT,
)
from settled_forward.core.fixed_point import (
    ONE as ONE,
)
from settled_forward.core.fixed_point import (
    ZERO as ZERO,
)
from settled_forward.core.fixed_point import (
    FixedDecimal as FixedDecimal,
)
from settled_forward.core.fixed_point import (
    FixedPointOverflow as FixedPointOverflow,
)
from settled_forward.core.result import (
    Err as Err,
)
from settled_forward.core.result import (
    Ok as Ok,
)
from settled_forward.core.result import (
    Result as Result,
)
from settled_forward.core.result import (
    first_err as first_err,
)
from settled_forward.core.result import (
    unwrap as unwrap,
)
