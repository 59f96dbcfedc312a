from pathlib import Path

import pytest

from iggy_service.catalog import CatalogError, ResourceCatalog, ResourceLookup


def write_manifest(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_merges_default_and_override_manifests(tmp_path: Path):
    default_manifest = write_manifest(
        tmp_path,
        "defaults.yaml",
        """
translations:
  aws_instance: aws_ec2_instance
  aws_lb: aws_elb
resources:
  aws_ec2_instance:
    properties: [ami, instance_type]
  aws_elb:
    properties: [dns_name]
  aws_vpc:
    properties: [cidr_block]
""",
    )
    override_manifest = write_manifest(
        tmp_path,
        "override.yaml",
        """
translations:
  aws_lb: aws_alb
resources:
  aws_ec2_instance:
    properties: [key_name]
  aws_alb:
    properties: [dns_name, internal]
  aws_vpc:
    enabled: false
""",
    )

    catalog = ResourceCatalog(default_manifests=[default_manifest])
    lookup = catalog.load([override_manifest])

    assert lookup.translations == {"aws_instance": "aws_ec2_instance", "aws_lb": "aws_alb"}
    assert lookup.known_types == {"aws_ec2_instance", "aws_elb", "aws_alb"}
    assert lookup.properties_for("aws_ec2_instance") == {"ami", "instance_type", "key_name"}
    assert lookup.properties_for("aws_alb") == {"dns_name", "internal"}
    assert not lookup.is_known("aws_vpc")


def test_default_manifest_loaded():
    lookup = ResourceCatalog().load()

    assert lookup.translate("aws_instance") == "aws_ec2_instance"
    assert lookup.translate("aws_vpc") == "aws_vpc"
    assert lookup.is_known("aws_vpc")
    assert lookup.is_known("aws_ec2_instance")
    assert "instance_type" in lookup.properties_for("aws_ec2_instance")
    assert "cidr_block" in lookup.properties_for("aws_vpc")


def test_unknown_type_has_no_properties():
    lookup = ResourceLookup(translations={}, properties={"aws_vpc": frozenset({"cidr_block"})})

    assert lookup.properties_for("null_resource") == frozenset()
    assert lookup.translate("null_resource") == "null_resource"


def test_missing_manifest_raises(tmp_path: Path):
    catalog = ResourceCatalog()
    with pytest.raises(CatalogError):
        catalog.load([tmp_path / "missing.yaml"])


@pytest.mark.parametrize(
    "content",
    [
        "resources: [unclosed",
        "- just\n- a\n- list\n",
        "translations: [aws_instance]\n",
        "resources:\n  aws_vpc: [cidr_block]\n",
    ],
)
def test_invalid_manifest_raises(tmp_path: Path, content: str):
    manifest = write_manifest(tmp_path, "broken.yaml", content)
    catalog = ResourceCatalog(default_manifests=[])

    with pytest.raises(CatalogError):
        catalog.load([manifest])


def test_empty_manifest_contributes_nothing(tmp_path: Path):
    manifest = write_manifest(tmp_path, "empty.yaml", "")

    lookup = ResourceCatalog(default_manifests=[manifest]).load()

    assert lookup.translations == {}
    assert lookup.known_types == frozenset()


def test_unsupported_manifest_version_raises(tmp_path: Path):
    manifest = write_manifest(
        tmp_path, "future.yaml", 'version: "2"\nresources:\n  aws_vpc:\n    properties: [cidr_block]\n'
    )

    with pytest.raises(CatalogError, match="unsupported catalog version 2"):
        ResourceCatalog(default_manifests=[manifest]).load()


def test_directory_manifest_raises(tmp_path: Path):
    with pytest.raises(CatalogError):
        ResourceCatalog(default_manifests=[tmp_path]).load()
