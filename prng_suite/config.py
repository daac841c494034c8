#!/usr/bin/env python3
"""
Suite Configuration - which generators a run builds, and how.

Usage:
    config = SuiteConfig.load("suite_config.json")
    config = SuiteConfig.default()
    config.save("my_suite.json")

Version: 1.0.0
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class GeneratorSpec(BaseModel):
    """One generator entry of a suite."""

    name: str = Field(
        ...,
        description="Suite-unique label (used for selection and as a composite handle)"
    )

    kind: str = Field(
        ...,
        description="Registry key (lcg, quadratic, fibonacci, inverse, combine, three_sigma, polar)"
    )

    params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Constructor overrides on top of the registry defaults"
    )

    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fixed seed; None uses the suite seed"
    )

    components: List[str] = Field(
        default_factory=list,
        description="Names of the two earlier suite members a composite wraps"
    )

    histogram_min: Optional[float] = None
    histogram_max: Optional[float] = None

    @field_validator('name', 'kind')
    @classmethod
    def normalize_key(cls, v: str) -> str:
        v = v.strip().lower().replace(' ', '_').replace('-', '_')
        if not v:
            raise ValueError("must not be empty")
        return v


def _default_lineup() -> List[GeneratorSpec]:
    return [
        GeneratorSpec(name="lcg", kind="lcg"),
        GeneratorSpec(name="quadratic", kind="quadratic"),
        GeneratorSpec(name="fibonacci", kind="fibonacci"),
        GeneratorSpec(name="inverse", kind="inverse", seed=1),
        GeneratorSpec(name="combine", kind="combine", components=["lcg", "quadratic"]),
        GeneratorSpec(name="three_sigma", kind="three_sigma"),
        GeneratorSpec(name="polar", kind="polar"),
    ]


class SuiteConfig(BaseModel):
    """Ordered generator lineup plus run defaults."""

    generators: List[GeneratorSpec] = Field(default_factory=_default_lineup)

    default_bins: int = Field(default=10, ge=1)

    log_level: str = Field(default="INFO")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @model_validator(mode='after')
    def check_unique_names(self) -> "SuiteConfig":
        seen = set()
        for spec in self.generators:
            if spec.name in seen:
                raise ValueError(f"Duplicate generator name: {spec.name}")
            seen.add(spec.name)
        return self

    @classmethod
    def default(cls) -> "SuiteConfig":
        return cls()

    @classmethod
    def load(cls, config_path: str) -> "SuiteConfig":
        """
        Load suite configuration from JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config fails validation
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Suite config not found: {config_path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: str):
        """Save configuration to JSON file."""
        with open(path, 'w') as f:
            json.dump(self.model_dump(), f, indent=2)
