"""
Transformation chains for delivery URLs.
"""

import copy
from typing import Any, Dict, List, Optional, Union

# Named parameter -> URL key
PARAM_KEYS = {
    "angle": "a",
    "aspect_ratio": "ar",
    "audio_codec": "ac",
    "background": "b",
    "bit_rate": "br",
    "border": "bo",
    "color": "co",
    "crop": "c",
    "default_image": "d",
    "density": "dn",
    "dpr": "dpr",
    "duration": "du",
    "effect": "e",
    "end_offset": "eo",
    "fetch_format": "f",
    "flags": "fl",
    "gravity": "g",
    "height": "h",
    "opacity": "o",
    "overlay": "l",
    "page": "pg",
    "quality": "q",
    "radius": "r",
    "start_offset": "so",
    "transformation": "t",
    "underlay": "u",
    "video_codec": "vc",
    "width": "w",
    "x": "x",
    "y": "y",
    "zoom": "z",
}

# Parameters whose list values are joined with dots
LIST_PARAMS = {"flags", "transformation"}

Component = Union[str, Dict[str, Any]]


def serialize_params(params: Dict[str, Any]) -> str:
    """
    Serialize a dict of named parameters into a single transformation component.

    Args:
        params: Named parameters, e.g. {"crop": "fill", "width": 100}

    Returns:
        The component string, e.g. "c_fill,w_100"

    Raises:
        ValueError: If a parameter name is not supported
    """
    params = dict(params)
    raw = params.pop("raw_transformation", None)

    pairs = []
    for name, value in params.items():
        if name not in PARAM_KEYS:
            raise ValueError(f"Unsupported transformation parameter: {name}")
        if value is None or value == "" or value == []:
            continue
        if name in LIST_PARAMS and isinstance(value, (list, tuple)):
            value = ".".join(str(v) for v in value)
        pairs.append(f"{PARAM_KEYS[name]}_{value}")

    pairs.sort()
    if raw:
        pairs.append(str(raw))
    return ",".join(pairs)


class Transformation:
    """
    An ordered chain of transformation components.

    Components are raw strings ("c_fill,w_100") or dicts of named parameters.
    The chain serializes to its components joined with "/".
    """

    def __init__(self, *components: Component, **params: Any):
        self._components: List[Component] = []
        for component in components:
            self.add_transformation(component)
        if params:
            self._components.append(dict(params))

    def add_transformation(
        self, transformation: Optional[Union[Component, "Transformation"]]
    ) -> "Transformation":
        """Append a component, or all components of another chain, to this one."""
        if transformation is None:
            return self
        if isinstance(transformation, Transformation):
            self._components.extend(copy.deepcopy(transformation._components))
        elif isinstance(transformation, dict):
            self._components.append(dict(transformation))
        elif isinstance(transformation, str):
            if transformation:
                self._components.append(transformation)
        else:
            raise TypeError(
                f"Cannot add {type(transformation).__name__} to a transformation"
            )
        return self

    def copy(self) -> "Transformation":
        return copy.deepcopy(self)

    @property
    def components(self) -> List[Component]:
        return list(self._components)

    def __str__(self) -> str:
        serialized = []
        for component in self._components:
            if isinstance(component, dict):
                component = serialize_params(component)
            if component:
                serialized.append(component)
        return "/".join(serialized)

    def __bool__(self) -> bool:
        return bool(str(self))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Transformation):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Transformation({str(self)!r})"
