from typing import Mapping, TypeVar

T = TypeVar("T", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: T) -> T:
    """Overlay the keys of ``config`` that the defaults know about onto a copy of the defaults."""
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]
