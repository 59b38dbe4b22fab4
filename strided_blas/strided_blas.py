from typing import Any

ZERO_STRIDE_POLICIES = ("skip", "validate")


class Config:
    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "Config":
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_initialized"):
            self._initialized = True  # Prevents reinitialization
            self._fast_path = True
            self._raise_on_error = False
            self._zero_stride_policy = "skip"
            self._use_jit = False

    @property
    def fast_path(self) -> bool:
        """
        Whether unit-stride calls may take the contiguous vectorised pass
        """
        return self._fast_path

    def set_fast_path(self, fast_path: bool) -> None:
        self._fast_path = bool(fast_path)

    @property
    def raise_on_error(self) -> bool:
        return self._raise_on_error

    def set_raise_on_error(self, raise_on_error: bool) -> None:
        """
        When set, operations raise StrideError instead of returning False
        Parameters
        ----------
        raise_on_error: bool
            Raise on failed buffer validation
        """
        self._raise_on_error = bool(raise_on_error)

    @property
    def zero_stride_policy(self) -> str:
        return self._zero_stride_policy

    def set_zero_stride_policy(self, policy: str) -> None:
        """
        Chooses how rotations treat a zero stride
        Parameters
        ----------
        policy: str
            "skip" returns success immediately when incx or incy is zero,
            "validate" checks the buffers and rotates the aliased element
            n times
        """
        if policy not in ZERO_STRIDE_POLICIES:
            raise ValueError(
                f"Unknown zero stride policy {policy!r}, "
                f"expected one of {ZERO_STRIDE_POLICIES}"
            )
        self._zero_stride_policy = policy

    @property
    def use_jit(self) -> bool:
        return self._use_jit

    def set_use_jit(self, use_jit: bool) -> None:
        self._use_jit = bool(use_jit)


class Session:
    """
    Lightweight context manager to scope Config settings per run.

    Example:
        with Session(raise_on_error=True, fast_path=False):
            ...
    Restores previous Config values on exit so tests/runs stay isolated.
    """

    def __init__(
        self,
        *,
        fast_path: bool | None = None,
        raise_on_error: bool | None = None,
        zero_stride_policy: str | None = None,
        use_jit: bool | None = None,
    ) -> None:
        cfg = Config()
        self._prev = {
            "fast_path": cfg.fast_path,
            "raise_on_error": cfg.raise_on_error,
            "zero_stride_policy": cfg.zero_stride_policy,
            "use_jit": cfg.use_jit,
        }
        self._fast_path = fast_path
        self._raise_on_error = raise_on_error
        self._zero_stride_policy = zero_stride_policy
        self._use_jit = use_jit
        self._cfg = cfg

    def __enter__(self) -> "Config":
        if self._fast_path is not None:
            self._cfg.set_fast_path(self._fast_path)
        if self._raise_on_error is not None:
            self._cfg.set_raise_on_error(self._raise_on_error)
        if self._zero_stride_policy is not None:
            self._cfg.set_zero_stride_policy(self._zero_stride_policy)
        if self._use_jit is not None:
            self._cfg.set_use_jit(self._use_jit)
        return self._cfg

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cfg.set_fast_path(self._prev["fast_path"])
        self._cfg.set_raise_on_error(self._prev["raise_on_error"])
        self._cfg.set_zero_stride_policy(self._prev["zero_stride_policy"])
        self._cfg.set_use_jit(self._prev["use_jit"])
