"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validamos la forma del combine-config y del documento OpenAPI en el borde,
  sin acoplar el Core a JSON/YAML ni a HTTP.
- `model_dump` nos da la serialización de salida con las mismas claves que
  espera swagger-combine.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def scalar_as_text(value: Any) -> Any:
    """Campos de texto: `None` -> "", cualquier escalar -> su texto.

    Mapas y listas se devuelven tal cual para que la validación los rechace.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return value
    return str(value)


class Info(BaseModel):
    """Bloque `info` (compartido por el combine-config y el OAS)."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(
        default="",
        description="Título declarado. En un OAS se usa como prefijo de tags.",
    )
    version: str = Field(
        default="",
        description="Versión declarada.",
    )

    @field_validator("title", "version", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        return scalar_as_text(value)


class TagEdit(BaseModel):
    """Instrucciones de swagger-combine para los tags de una API.

    - `rename`: tag original -> tag nuevo (claves únicas).
    - `add`: tags que se insertan siempre; se respeta el orden y se permiten
      duplicados.
    """

    model_config = ConfigDict(extra="allow")

    rename: dict[str, str] | None = Field(
        default=None,
        description="Mapa de renombrado de tags.",
    )
    add: list[str] | None = Field(
        default=None,
        description="Tags añadidos incondicionalmente.",
    )


class APIEntry(BaseModel):
    """Una API fuente dentro del combine-config."""

    model_config = ConfigDict(extra="allow")

    url: str = Field(
        ...,
        min_length=1,
        description="URL del documento OpenAPI de la API.",
    )
    tags: TagEdit | None = Field(
        default=None,
        description="Edición de tags (rename/add) para swagger-combine.",
    )
    paths: dict[str, Any] | None = Field(
        default=None,
        description="Overrides de paths que swagger-combine aplica tal cual.",
    )

    def ensure_tag_edit(self) -> TagEdit:
        if self.tags is None:
            self.tags = TagEdit()
        return self.tags


class CombineConfig(BaseModel):
    """Agregado principal: el fichero de configuración de swagger-combine.

    El orden de `apis` se conserva en carga, transformación y escritura.
    """

    model_config = ConfigDict(extra="allow")

    swagger: str = Field(
        default="",
        description="Versión de esquema declarada (p.ej. '2.0').",
    )
    info: Info = Field(default_factory=Info)
    apis: list[APIEntry] = Field(default_factory=list)

    @field_validator("swagger", mode="before")
    @classmethod
    def _swagger_as_text(cls, value: Any) -> Any:
        return scalar_as_text(value)

    @field_validator("apis", mode="before")
    @classmethod
    def _apis_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_payload(self) -> dict[str, Any]:
        """Forma serializable; omite `tags`/`paths` (y rename/add) ausentes."""

        return self.model_dump(mode="json", exclude_none=True)


class OpenAPIDoc(BaseModel):
    """Documento OpenAPI de una API fuente.

    Solo interesan `info.title` y los tags de cada operación. Los path items
    se guardan crudos: pueden traer claves que no son operaciones
    (`parameters`, `summary`, `$ref`...) y eso no es un error.
    """

    model_config = ConfigDict(extra="ignore")

    info: Info = Field(default_factory=Info)
    paths: dict[str, Any] = Field(default_factory=dict)

    @field_validator("info", "paths", mode="before")
    @classmethod
    def _none_as_default(cls, value: Any) -> Any:
        return {} if value is None else value

    def iter_operation_tags(self):
        """Recorre path -> método -> tag y emite cada tag de texto."""

        for path_item in self.paths.values():
            if not isinstance(path_item, dict):
                continue
            for operation in path_item.values():
                if not isinstance(operation, dict):
                    continue
                tags = operation.get("tags")
                if not isinstance(tags, list):
                    continue
                for tag in tags:
                    if isinstance(tag, str):
                        yield tag
