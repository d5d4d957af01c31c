"""Type definitions for elevation generation."""

import math
import operator

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Octave offsets are unsigned 32-bit draws, so they stay below this bound.
OFFSET_LIMIT = 2**32


class InvalidParametersError(ValueError):
    """Raised when a parameter set cannot produce a meaningful elevation field."""


class NoiseParameters(BaseModel):
    """Fractal noise settings for one generation run."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    scale: float = Field(
        default=0.2,
        gt=0.0,
        description="Sampling window relative to the grid size (larger = zoomed in)",
    )
    octaves: int = Field(default=8, ge=0, description="Number of noise layers to combine")
    persistence: float = Field(default=0.35, gt=0.0, description="Amplitude multiplier per octave")
    lacunarity: float = Field(default=4.0, gt=0.0, description="Frequency multiplier per octave")


class FalloffParameters(BaseModel):
    """Shape of the island falloff curve.

    ``a`` controls the steepness of the curve and ``b`` moves its midpoint
    towards the edge. ``multiplier`` scales how much of the elevation range
    is removed at the outermost cells.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    a: float = Field(default=2.0, gt=0.0)
    b: float = Field(default=6.0, gt=0.0)
    multiplier: float = Field(default=0.7, ge=0.0, le=1.0)


class WorldParameters(BaseModel):
    """Everything needed, besides a seed, to generate a world."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    width: int = Field(default=500, ge=1)
    height: int = Field(default=500, ge=1)
    elevation_parameters: NoiseParameters = Field(default_factory=NoiseParameters)
    falloff: FalloffParameters | None = Field(default_factory=FalloffParameters)
    sea_level: float = Field(
        default=0.0,
        description="Raw elevation separating sea from land",
    )


def validate_noise_parameters(params: NoiseParameters) -> None:
    """Check that every octave gets a finite, non-zero amplitude and frequency.

    Raises:
        InvalidParametersError: if the octave sweep under- or overflows.
    """
    amplitude = 1.0
    frequency = 1.0
    for octave in range(params.octaves):
        finite = math.isfinite(amplitude) and math.isfinite(frequency)
        if not finite or amplitude == 0.0 or frequency == 0.0:
            raise InvalidParametersError(
                f"octave {octave} has amplitude={amplitude} frequency={frequency}; "
                f"reduce octaves or bring persistence/lacunarity closer to 1"
            )
        amplitude *= params.persistence
        frequency *= params.lacunarity


def validate_sample_range(parameters: WorldParameters) -> None:
    """Check that the furthest sample coordinate of every octave is finite.

    Offsets reach up to ``OFFSET_LIMIT``, so the worst case for an octave is
    ``frequency * (max(width, height) + OFFSET_LIMIT) / (scale * min(width, height))``.

    Raises:
        InvalidParametersError: if an octave would sample at infinity.
    """
    noise = parameters.elevation_parameters
    longest = max(parameters.width, parameters.height)
    shortest = min(parameters.width, parameters.height)
    reach = (longest + OFFSET_LIMIT) / (noise.scale * shortest)
    frequency = 1.0
    for octave in range(noise.octaves):
        if not math.isfinite(frequency * reach):
            raise InvalidParametersError(
                f"octave {octave} samples beyond the finite range "
                f"(scale={noise.scale}, frequency={frequency})"
            )
        frequency *= noise.lacunarity


def validate_world_parameters(parameters: WorldParameters) -> None:
    """Re-check field constraints, then the cross-field rules they can't express.

    Copies made with ``model_copy(update=...)`` skip pydantic validation, so
    the whole parameter set is validated again here.

    Raises:
        InvalidParametersError: for any parameter set that cannot be generated.
    """
    try:
        parameters = WorldParameters.model_validate(parameters.model_dump())
    except ValidationError as exc:
        raise InvalidParametersError(f"invalid world parameters: {exc}") from exc

    validate_noise_parameters(parameters.elevation_parameters)
    validate_sample_range(parameters)
    if parameters.falloff is not None and parameters.elevation_parameters.octaves == 0:
        raise InvalidParametersError(
            "falloff needs a non-flat field; octaves must be at least 1 when falloff is set"
        )


def validate_seed(seed: int) -> int:
    """Return *seed* as a plain int, rejecting values outside the 64-bit range."""
    if isinstance(seed, bool):
        raise InvalidParametersError(f"seed must be an integer, got {seed!r}")
    try:
        value = operator.index(seed)
    except TypeError as exc:
        raise InvalidParametersError(f"seed must be an integer, got {seed!r}") from exc
    if not 0 <= value < 2**64:
        raise InvalidParametersError(f"seed must be in [0, 2**64), got {value}")
    return value
