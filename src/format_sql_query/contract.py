"""Error contract for rendering functions."""

from collections.abc import Callable
from functools import wraps

from .errors import FormatSqlQueryError, RenderContractViolationError


def contract[R, **P](
    *,
    known_err: tuple[type[Exception], ...] = (FormatSqlQueryError,),
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Map unexpected exceptions of a rendering function to a contract violation.

    Parameters
    ----------
    known_err : tuple[type[Exception], ...], optional
        Exception types passed through unchanged.
        By default, every error of this package.

    Returns
    -------
    Callable[[Callable[P, R]], Callable[P, R]]
        Decorator enforcing the contract.

    Examples
    --------
    >>> @contract()
    ... def render(fragments: list[str]) -> str:
    ...     return "".join(fragments)
    >>> render(["a", "b"])
    'ab'
    >>> try:
    ...     render([1, 2])
    ... except RenderContractViolationError as e:
    ...     print(e.function_name)
    render
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except known_err:
                raise
            except Exception as e:
                raise RenderContractViolationError(
                    function_name=fn.__name__,
                    original_exception=e,
                ) from e

        return wrapper

    return decorator
