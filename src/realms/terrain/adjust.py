"""Step-wise adjustment of the tunable world parameters.

A configuration front-end shows one row per :class:`ParameterField` and
nudges it up or down with :func:`adjust`. Parameters are immutable, so every
adjustment returns a new, validated :class:`WorldParameters`.
"""

from enum import Enum

from realms.terrain.types import NoiseParameters, WorldParameters

# Rounding applied after a step so repeated nudges don't accumulate float drift.
_STEP_PRECISION = 6


class ParameterField(Enum):
    """Tunable fields, each carrying its label and step size."""

    SEA_LEVEL = ("Sea level", 0.05)
    OCTAVES = ("Octaves", 1)
    PERSISTENCE = ("Persistence", 0.05)
    LACUNARITY = ("Lacunarity", 0.1)

    def __init__(self, label: str, step: float) -> None:
        self.label = label
        self.step = step


def current_value(parameters: WorldParameters, field: ParameterField) -> float:
    """Current value of *field* in *parameters*."""
    noise = parameters.elevation_parameters
    if field is ParameterField.SEA_LEVEL:
        return parameters.sea_level
    if field is ParameterField.OCTAVES:
        return noise.octaves
    if field is ParameterField.PERSISTENCE:
        return noise.persistence
    return noise.lacunarity


def describe(parameters: WorldParameters, field: ParameterField) -> str:
    """Display text for *field*, e.g. ``"Octaves: 8"``."""
    value = current_value(parameters, field)
    if field is ParameterField.OCTAVES:
        return f"{field.label}: {value}"
    return f"{field.label}: {value:.2f}"


def adjust(parameters: WorldParameters, field: ParameterField, steps: int = 1) -> WorldParameters:
    """Return a copy of *parameters* with *field* moved by ``steps * field.step``.

    Raises:
        pydantic.ValidationError: if the adjusted value breaks a field
            constraint (for example octaves below zero).
    """
    if field is ParameterField.OCTAVES:
        value = parameters.elevation_parameters.octaves + steps * field.step
    else:
        value = round(current_value(parameters, field) + steps * field.step, _STEP_PRECISION)

    if field is ParameterField.SEA_LEVEL:
        return WorldParameters.model_validate({**parameters.model_dump(), "sea_level": value})

    name = field.name.lower()
    noise = NoiseParameters.model_validate(
        {**parameters.elevation_parameters.model_dump(), name: value}
    )
    return parameters.model_copy(update={"elevation_parameters": noise})
