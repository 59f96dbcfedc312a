from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from iggy_service.adapters import NotFoundError
from iggy_service.catalog import ResourceCatalog
from iggy_service.extraction import UnsupportedResourceError
from iggy_service.models import StateDocument
from iggy_service.service import ExtractionResult, GenerationResult, IggyService

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class DummyStateLoader:
    def __init__(self, path: Path, **kwargs: Any) -> None:
        self.path = Path(path)
        self.kwargs = kwargs

    def load(self) -> StateDocument:
        return StateDocument(
            source=self.path,
            data={
                "modules": [
                    {
                        "resources": {
                            "aws_vpc.main": {
                                "type": "aws_vpc",
                                "primary": {
                                    "id": "vpc-1",
                                    "attributes": {
                                        "cidr_block": "10.0.0.0/16",
                                        "tags.iggy_name_net": "net",
                                    },
                                },
                            }
                        }
                    }
                ]
            },
        )


def test_extract_runs_pipeline() -> None:
    service = IggyService(loader_factory=DummyStateLoader)

    result = service.extract(Path("/workspace/terraform.tfstate"))

    assert isinstance(result, ExtractionResult)
    assert list(result.bindings) == ["vpc-1:net"]
    assert result.metadata["binding_count"] == 1
    assert result.metadata["module_count"] == 1
    assert result.metadata["source"] == "/workspace/terraform.tfstate"


def test_generate_runs_pipeline_with_extra_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "extra.yaml"
    manifest.write_text(
        "resources:\n  aws_vpc:\n    properties: [tags.iggy_name_net]\n", encoding="utf-8"
    )
    service = IggyService(loader_factory=DummyStateLoader)

    result = service.generate(Path("terraform.tfstate"), manifests=[manifest])

    assert isinstance(result, GenerationResult)
    assert result.metadata["control_count"] == 1
    assert [assertion.name for assertion in result.controls[0].assertions] == [
        "exist",
        "cidr_block",
        "tags.iggy_name_net",
    ]


def test_generate_uses_injected_catalog(tmp_path: Path) -> None:
    manifest = tmp_path / "empty.yaml"
    manifest.write_text("resources: {}\n", encoding="utf-8")
    service = IggyService(
        loader_factory=DummyStateLoader,
        catalog=ResourceCatalog(default_manifests=[manifest]),
    )

    result = service.generate(Path("terraform.tfstate"))

    assert result.controls == []


def test_errors_propagate_to_caller(tmp_path: Path) -> None:
    service = IggyService()

    with pytest.raises(NotFoundError):
        service.extract(tmp_path / "missing.tfstate")

    with pytest.raises(UnsupportedResourceError):
        service.extract(FIXTURES / "state-unsupported-tag.json")
