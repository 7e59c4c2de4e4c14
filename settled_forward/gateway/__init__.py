"""settled_forward.gateway — wire codec for execute requests and results."""

from settled_forward.gateway.parser import (
    encode_execute_input as encode_execute_input,
)
from settled_forward.gateway.parser import (
    encode_execute_result as encode_execute_result,
)
from settled_forward.gateway.parser import (
    parse_execute_input as parse_execute_input,
)
from settled_forward.gateway.parser import (
    parse_execute_result as parse_execute_result,
)
from settled_forward.gateway.types import (
    ExecuteInput as ExecuteInput,
)
from settled_forward.gateway.types import (
    ExecutionResult as ExecutionResult,
)
from settled_forward.gateway.types import (
    PriceObservation as PriceObservation,
)
