"""Common contract for the empirical path-loss models.

Every model holds exactly one immutable parameter block and evaluates a
closed-form formula per call. Losses are returned with the signed convention
of the models: a path loss of L dB is reported as -L, so that

    received power [dBm] = tx power [dBm] + compute_loss(d)

Below each model's minimum distance the formula is not applied and the loss is
0 dB (a defined result, not an error).

Concurrency: evaluation is pure apart from the SUI random source. Give every
concurrent caller its own model (or its own random generator). Replacing the
parameter block while evaluations are in flight is not supported; serialize
reconfiguration on the caller side.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from enum import Enum
from typing import Any, Sequence

from .geometry import euclidean_distance_m


class ParameterEnum(str, Enum):
    """Enumerated model setting that also accepts its name or value as text."""

    @classmethod
    def parse(cls, value: Any) -> "ParameterEnum":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown {cls.__name__} {value!r}; expected one of: {choices}")


class PathLossModel(ABC):
    """Base class for path-loss models.

    Subclasses implement `compute_loss(distance_m)` and declare the type of
    their parameter block in `params_type`.
    """

    params_type: type = object
    name: str = "pathloss"

    def __init__(self, params: Any = None):
        if params is None:
            params = self.params_type()
        self.set_parameters(params)

    @property
    def params(self) -> Any:
        return self._params

    def set_parameters(self, params: Any) -> None:
        """Replace the parameter block (configuration-time only)."""
        if not isinstance(params, self.params_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.params_type.__name__}, got {type(params).__name__}"
            )
        self._params = params

    def configure(self, **changes: Any) -> Any:
        """Set individual parameters by field name; returns the new block."""
        self.set_parameters(replace(self._params, **changes))
        return self._params

    @abstractmethod
    def compute_loss(self, distance_m: float) -> float:
        """Signed loss in dB (<= 0) for a Tx-Rx separation in meters."""
        raise NotImplementedError

    def received_power_dbm(self, tx_power_dbm: float, distance_m: float) -> float:
        """Received power in dBm: tx power plus the signed loss."""
        return tx_power_dbm + self.compute_loss(distance_m)

    def path_loss_db(self, distance_m: float) -> float:
        """Positive attenuation in dB (the negated signed loss)."""
        return -self.compute_loss(distance_m)

    def loss_between(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Signed loss between two position vectors given in meters."""
        return self.compute_loss(euclidean_distance_m(a, b))

    def received_power_between(self, tx_power_dbm: float, a: Sequence[float], b: Sequence[float]) -> float:
        return self.received_power_dbm(tx_power_dbm, euclidean_distance_m(a, b))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"
