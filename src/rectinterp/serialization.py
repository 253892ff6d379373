from __future__ import annotations

import json
from numbers import Real
from typing import Union, Annotated, Literal, Any

import numpy as np
from numpy.typing import NDArray

from pydantic import (
    field_validator,
    field_serializer,
    ConfigDict,
    BaseModel,
    Field,
)


class _ArrayBase(BaseModel):
    """
    Shared behaviour for the serializable array wrappers.

    Arrays keep their shape: the serialized form is a JSON string of the
    nested list, so 0-D and empty arrays round-trip as well.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @classmethod
    def view(cls, data: NDArray) -> "_ArrayBase":
        """
        Wrap ``data`` without copying when it already has the right
        data type and is contiguous, otherwise validate (copy) as usual.
        """
        dtype = cls.model_fields["dtype"].default
        if isinstance(data, np.ndarray) and data.dtype == dtype and data.flags.c_contiguous:
            return cls.model_construct(data=data)
        return cls(data=data)

    def __eq__(self, other: object) -> bool:
        # Bitwise comparison, so that NaN entries compare equal to themselves
        if not isinstance(other, _ArrayBase):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.data.shape == other.data.shape
            and self.data.tobytes() == other.data.tobytes()
        )

    @field_serializer("data", return_type=str, check_fields=False)
    def _serialize_x(data: Any) -> str:
        return json.dumps(data.tolist())


def _coerce(data: Any, dtype) -> NDArray:
    if isinstance(data, str):
        y = np.array(json.loads(data), dtype=dtype)
    elif isinstance(data, np.ndarray):
        y = data.astype(dtype, order="C")
    elif isinstance(data, (list, tuple, Real)):
        y = np.array(data, dtype=dtype)
    else:
        raise TypeError(f"Cannot convert {type(data).__name__} to an array")

    return y


class ArrayF64(_ArrayBase):
    """
    Serializable wrapper for NDArray[float64].
    """
    data: NDArray[np.float64]
    dtype: Literal["float64"] = "float64"

    @field_validator("data", mode="before")
    def _validate_x(data: Any) -> NDArray[np.float64]:
        return _coerce(data, np.float64)


class ArrayF32(_ArrayBase):
    """
    Serializable wrapper for NDArray[float32].

    The data is represented as a list of float64 on disk and in RAM
    during serialization and deserialization.
    """
    data: NDArray[np.float32]
    dtype: Literal["float32"] = "float32"

    @field_validator("data", mode="before")
    def _validate_x(data: Any) -> NDArray[np.float32]:
        return _coerce(data, np.float32)


Array = Annotated[Union[ArrayF32, ArrayF64], Field(discriminator="dtype")]


def array_type(dtype) -> type[ArrayF32] | type[ArrayF64]:
    """Wrapper class used to store arrays of ``dtype``; anything but float32 is stored as float64."""
    return ArrayF32 if np.dtype(dtype) == np.float32 else ArrayF64
