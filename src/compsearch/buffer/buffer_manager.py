"""
Component registry for the search tool.

This module holds the components that can be searched and resolves them into
labelled buffers. Registries can be built from a mapping, a JSON file or a
directory tree.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from compsearch.buffer.schemas import Buffer, Component, Control
from compsearch.core.exceptions import RegistryError
from compsearch.core.settings import DEFAULT_CONTROL_NAME

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """
    In-memory registry of components and their controls.

    Components are kept in insertion order, which is also the order buffers
    are searched and reported in.
    """

    def __init__(self, components: Optional[List[Component]] = None):
        self._components: Dict[str, Component] = {}
        for component in components or []:
            self.add_component(component)

    def add_component(self, component: Component) -> None:
        """Add a component, replacing any existing one with the same name."""
        self._components[component.name] = component

    def get_components(self) -> List[Component]:
        return list(self._components.values())

    def get_controls(self, component_name: str) -> List[Control]:
        """
        Get the controls of a component.

        Args:
            component_name: Name of the component

        Returns:
            The component's controls, or an empty list if it does not exist
        """
        component = self._components.get(component_name)
        if component is None:
            return []
        return list(component.controls)

    def get_control(self, component_name: str, control_name: str) -> Optional[Control]:
        """
        Look up one control by name.

        Returns None when either the component or the control does not exist.
        """
        for control in self.get_controls(component_name):
            if control.name == control_name:
                return control
        return None

    def iter_buffers(
        self,
        search_all_controls: bool = False,
        control_name: str = DEFAULT_CONTROL_NAME
    ) -> Iterator[Buffer]:
        """
        Resolve the registry into labelled buffers.

        Args:
            search_all_controls: Search every text-valued control of every component
            control_name: The control to search when not searching all controls

        Yields:
            Buffers labelled "Component.Control" when searching all controls,
            or "Component" when searching a single named control
        """
        for component in self._components.values():
            if search_all_controls:
                for control in component.controls:
                    if not control.is_text:
                        logger.debug(f"Skipping non-text control {component.name}.{control.name}")
                        continue
                    yield Buffer(label=f"{component.name}.{control.name}", text=control.value)
            else:
                control = self.get_control(component.name, control_name)
                # Missing or non-text controls count as no match
                if control is None or not control.is_text:
                    continue
                yield Buffer(label=component.name, text=control.value)

    def __len__(self) -> int:
        return len(self._components)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ComponentRegistry":
        """
        Build a registry from {"Component": {"control": value, ...}, ...}.

        Raises:
            RegistryError: If the data does not have that shape
        """
        if not isinstance(data, Mapping):
            raise RegistryError(
                f"Registry data must be an object of components, got {type(data).__name__}"
            )

        registry = cls()
        for component_name, controls in data.items():
            if not isinstance(controls, Mapping):
                raise RegistryError(
                    f"Component '{component_name}' must map control names to values"
                )
            registry.add_component(Component(
                name=str(component_name),
                controls=[Control(name=str(name), value=value) for name, value in controls.items()]
            ))
        return registry

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "ComponentRegistry":
        """Load a registry from a JSON file with the same shape as from_dict."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise RegistryError(f"Could not read registry file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise RegistryError(f"Invalid JSON in registry file {path}: {e}") from e

        registry = cls.from_dict(data)
        logger.info(f"Loaded {len(registry)} components from {path}")
        return registry

    @classmethod
    def from_directory(cls, path: Union[str, Path]) -> "ComponentRegistry":
        """
        Load a registry from a directory tree.

        Each subdirectory is a component and each file inside it is a text
        control named after the file stem. Hidden entries are ignored.
        """
        root = Path(path)
        if not root.is_dir():
            raise RegistryError(f"Registry directory not found: {root}")

        registry = cls()
        for component_dir in sorted(p for p in root.iterdir() if p.is_dir()):
            if component_dir.name.startswith("."):
                continue
            controls = []
            seen = set()
            for control_file in sorted(p for p in component_dir.iterdir() if p.is_file()):
                if control_file.name.startswith("."):
                    continue
                if control_file.stem in seen:
                    logger.warning(
                        f"Skipping {control_file}: {component_dir.name} already has a control named {control_file.stem}"
                    )
                    continue
                try:
                    text = control_file.read_text(encoding="utf-8", errors="replace")
                except OSError as e:
                    raise RegistryError(f"Could not read control file {control_file}: {e}") from e
                seen.add(control_file.stem)
                controls.append(Control(name=control_file.stem, value=text))
            registry.add_component(Component(name=component_dir.name, controls=controls))

        logger.info(f"Loaded {len(registry)} components from {root}")
        return registry

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ComponentRegistry":
        """Load from a directory, or from a JSON file for any other path."""
        path = Path(path)
        if path.is_dir():
            return cls.from_directory(path)
        return cls.from_json_file(path)
