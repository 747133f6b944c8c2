import logging
from typing import Any

import serde
import torch
from plum import dispatch


def init() -> None:
    serde.add_serializer(Serializer())
    serde.add_deserializer(Deserializer())


class Serializer:
    @dispatch
    def serialize(self, value: torch.Tensor) -> dict[str, Any]:
        return serialize_tensor(value)


class Deserializer:
    @dispatch
    def deserialize(self, cls: type[torch.Tensor], value: Any) -> torch.Tensor:
        return deserialize_tensor(value)


def serialize_tensor(tensor: torch.Tensor) -> dict[str, Any]:
    return {'data': tensor.tolist(), 'dtype': str(tensor.dtype)}


def deserialize_tensor(data: Any) -> torch.Tensor:
    match data:
        case {'data': list(values), 'dtype': str(serialized_dtype)}:
            dtype = getattr(torch, serialized_dtype.removeprefix('torch.'), None)

            if not isinstance(dtype, torch.dtype):
                raise serde.SerdeError(f'Unknown tensor dtype: {serialized_dtype}')

            logging.debug(f'Decoding {serialized_dtype} tensor')

            return torch.tensor(values, dtype=dtype)

        case _:
            raise serde.SerdeError(
                f'Expected dictionary with data: list and dtype: str keys, got {data}'
            )
