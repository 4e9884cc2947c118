"""Resource and data-source kinds exposed by the provider.

The CRUD handlers for each kind live outside this package; what is declared
here is the name each kind is registered under and the GoCD endpoint it
works against through the shared GoCDClient.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceDefinition:
    """Declaration of one resource or data-source kind.

    ``api_path`` and ``api_version`` are None for data sources that only
    render definitions locally.
    """

    name: str
    description: str = ""
    api_path: str | None = None
    api_version: int | None = None


class ResourceRegistry:
    """Read-mostly table of definitions keyed by unique name."""

    def __init__(self, definitions: Iterable[ResourceDefinition] = ()) -> None:
        self._definitions: dict[str, ResourceDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ResourceDefinition) -> None:
        if definition.name in self._definitions:
            raise ValueError(f"Duplicate resource name: {definition.name}")
        self._definitions[definition.name] = definition

    def get(self, name: str) -> ResourceDefinition:
        return self._definitions[name]

    def names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[ResourceDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


RESOURCE_DEFINITIONS: tuple[ResourceDefinition, ...] = (
    ResourceDefinition(
        name="gocd_environment",
        description="A GoCD environment grouping pipelines and agents.",
        api_path="/api/admin/environments",
        api_version=2,
    ),
    ResourceDefinition(
        name="gocd_environment_association",
        description="Association of a pipeline with a GoCD environment.",
        api_path="/api/admin/environments",
        api_version=2,
    ),
    ResourceDefinition(
        name="gocd_pipeline_template",
        description="A reusable pipeline template.",
        api_path="/api/admin/templates",
        api_version=3,
    ),
    ResourceDefinition(
        name="gocd_pipeline",
        description="A GoCD pipeline configuration.",
        api_path="/api/admin/pipelines",
        api_version=5,
    ),
    ResourceDefinition(
        name="gocd_pipeline_stage",
        description="A stage within a pipeline or pipeline template.",
        api_path="/api/admin/pipelines",
        api_version=5,
    ),
)

DATA_SOURCE_DEFINITIONS: tuple[ResourceDefinition, ...] = (
    ResourceDefinition(
        name="gocd_job_definition",
        description="Renders a job definition for use in a pipeline stage.",
    ),
    ResourceDefinition(
        name="gocd_task_definition",
        description="Renders a task definition for use in a job.",
    ),
)
