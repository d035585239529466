"""
Configuration for the ontology store and reasoner.

Settings mirror the recognised option names:

    ontology.backend                             storage backend
    ontology.seeds                               seed paths validated at startup
    reasoner.backend                             reasoning backend
    reasoner.inference.class_hierarchy           ancestors_of / descendants_of
    reasoner.inference.property_assertions       related_individuals
    reasoner.inference.property_paths            shortest_path

They can be built directly, from a nested mapping, or from environment
variables (a .env file is honoured through python-dotenv).
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class OntologyBackend(str, Enum):
    """Available storage backends."""
    IN_MEMORY = "in_memory"


class ReasonerBackend(str, Enum):
    """Available reasoning backends."""
    NATIVE = "native"


class InferenceSettings(BaseModel):
    """Feature toggles gating the reasoning queries."""

    class_hierarchy: bool = Field(True, description="Enable ancestors_of and descendants_of")
    property_assertions: bool = Field(True, description="Enable related_individuals")
    property_paths: bool = Field(True, description="Enable shortest_path")


class OntologySettings(BaseModel):
    backend: OntologyBackend = Field(OntologyBackend.IN_MEMORY, description="Storage backend")
    seeds: List[Path] = Field(default_factory=list, description="Seed paths that must exist")


class ReasonerSettings(BaseModel):
    backend: ReasonerBackend = Field(ReasonerBackend.NATIVE, description="Reasoning backend")
    inference: InferenceSettings = Field(default_factory=InferenceSettings)


class Settings(BaseModel):
    """Complete configuration of the ontology module."""

    ontology: OntologySettings = Field(default_factory=OntologySettings)
    reasoner: ReasonerSettings = Field(default_factory=ReasonerSettings)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'Settings':
        """
        Build settings from a nested mapping, e.g. a parsed configuration file.

        Raises:
            pydantic.ValidationError: If a value is invalid (unknown backend, ...)
        """
        return cls.model_validate(dict(data or {}))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (the .env file is
                only loaded when reading os.environ)
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        data: Dict[str, Any] = {"ontology": {}, "reasoner": {"inference": {}}}

        if environ.get("ONTOLOGY_BACKEND"):
            data["ontology"]["backend"] = environ["ONTOLOGY_BACKEND"]
        seeds = environ.get("ONTOLOGY_SEEDS", "")
        data["ontology"]["seeds"] = [part for part in seeds.split(os.pathsep) if part.strip()]

        if environ.get("REASONER_BACKEND"):
            data["reasoner"]["backend"] = environ["REASONER_BACKEND"]
        for toggle in InferenceSettings.model_fields:
            value = environ.get(f"REASONER_INFERENCE_{toggle.upper()}")
            if value is not None and value.strip():
                # pydantic parses 1/0, true/false, yes/no, on/off
                data["reasoner"]["inference"][toggle] = value.strip()

        return cls.model_validate(data)
