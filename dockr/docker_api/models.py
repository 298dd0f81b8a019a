"""Структуры данных, которыми обмениваются клиент и Docker Engine.

Полезные нагрузки движка описаны через TypedDict с оригинальными именами
полей: клиент передаёт их без изменений. Результаты операций оформлены
dataclass-конвертами с полем ``error``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict


# ----------------------------------------------------------------- payloads
class ObjectVersion(TypedDict, total=False):
    """Версия объекта swarm для защищённых обновлений."""

    Index: int


class Driver(TypedDict, total=False):
    Name: str
    Options: Dict[str, str]


class ConfigSpec(TypedDict, total=False):
    """Спецификация config: ``Data`` на проводе хранится в base64."""

    Name: str
    Labels: Dict[str, str]
    Data: str
    Templating: Driver


class Config(TypedDict, total=False):
    ID: str
    Version: ObjectVersion
    CreatedAt: str
    UpdatedAt: str
    Spec: ConfigSpec


class IdResponse(TypedDict):
    """Ответ движка, содержащий только идентификатор созданного объекта."""

    ID: str


class VolumeUsageData(TypedDict, total=False):
    Size: int
    RefCount: int


class Volume(TypedDict, total=False):
    Name: str
    Driver: str
    Mountpoint: str
    CreatedAt: str
    Status: Dict[str, Any]
    Labels: Dict[str, str]
    Scope: str
    Options: Dict[str, str]
    UsageData: VolumeUsageData


class VolumeCreateOptions(TypedDict, total=False):
    Name: str
    Driver: str
    DriverOpts: Dict[str, str]
    Labels: Dict[str, str]


class VolumePruneReport(TypedDict):
    VolumesDeleted: List[str]
    SpaceReclaimed: int


class Container(TypedDict, total=False):
    """Краткое представление контейнера из ``GET /containers/json``."""

    Id: str
    Names: List[str]
    Image: str
    ImageID: str
    Command: str
    Created: int
    Ports: List[Dict[str, Any]]
    SizeRw: int
    SizeRootFs: int
    Labels: Dict[str, str]
    State: str
    Status: str
    HostConfig: Dict[str, Any]
    NetworkSettings: Dict[str, Any]
    Mounts: List[Dict[str, Any]]


# ------------------------------------------------------------------- errors
@dataclass(frozen=True, slots=True)
class ErrorResponse:
    """Единое представление ошибки любой операции клиента."""

    code: int
    message: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует ошибку, пропуская отсутствующее описание."""

        data: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.description is not None:
            data["description"] = self.description
        return data


# ------------------------------------------------------------------ results
@dataclass(slots=True)
class _Result:
    error: Optional[ErrorResponse] = None

    @property
    def ok(self) -> bool:
        """Успех подтверждается только отсутствием ошибки."""

        return self.error is None


@dataclass(slots=True)
class DoneResult(_Result):
    """Результат операций без полезной нагрузки (delete/update)."""

    done: bool = False


@dataclass(slots=True)
class ConfigListResult(_Result):
    configs: List[Config] = field(default_factory=list)


@dataclass(slots=True)
class ConfigCreateResult(_Result):
    config_id: Optional[IdResponse] = None


@dataclass(slots=True)
class ConfigInspectResult(_Result):
    config: Optional[Config] = None


@dataclass(slots=True)
class VolumeListResult(_Result):
    volumes: List[Volume] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(slots=True)
class VolumeCreateResult(_Result):
    volume: Optional[Volume] = None


@dataclass(slots=True)
class VolumeInspectResult(_Result):
    volume: Optional[Volume] = None


@dataclass(slots=True)
class VolumePruneResult(_Result):
    report: Optional[VolumePruneReport] = None


@dataclass(slots=True)
class ContainerListResult(_Result):
    containers: List[Container] = field(default_factory=list)
