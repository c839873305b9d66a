"""Tests for ease data models — coordinates and collaborator models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import (
    AttachedArtifact,
    BuildProject,
    Dependency,
    ProjectHelper,
    RecordingProjectHelper,
    manifest_filename,
)


class TestArtifactCoordinate:
    def test_frozen(self, make_coordinate):
        c = make_coordinate()
        with pytest.raises(ValidationError):
            c.version = "2.0"

    def test_equality_covers_all_fields(self, make_coordinate):
        assert make_coordinate() == make_coordinate()
        assert make_coordinate() != make_coordinate(version="1.1")
        assert make_coordinate(classifier="sources") != make_coordinate()

    def test_absent_classifier_differs_from_empty(self, make_coordinate):
        assert make_coordinate(classifier=None) != make_coordinate(classifier="")
        assert len({make_coordinate(classifier=None), make_coordinate(classifier="")}) == 2

    @pytest.mark.parametrize("field", ["group_id", "artifact_id", "type", "version"])
    def test_required_fields_non_empty(self, make_coordinate, field):
        with pytest.raises(ValidationError):
            make_coordinate(**{field: ""})

    @pytest.mark.parametrize(
        "field", ["group_id", "artifact_id", "type", "version", "classifier"]
    )
    def test_colon_rejected(self, make_coordinate, field):
        with pytest.raises(ValidationError):
            make_coordinate(**{field: "a:b"})

    def test_to_line_without_classifier(self, make_coordinate):
        assert make_coordinate().to_line() == "org.example:core:jar:1.0"

    def test_to_line_with_classifier(self, make_coordinate):
        c = make_coordinate(classifier="sources")
        assert c.to_line() == "org.example:core:jar:sources:1.0"
        assert str(c) == c.id == c.to_line()

    def test_from_line_four_tokens(self):
        c = ArtifactCoordinate.from_line("g:a:pom:2.1")
        assert (c.group_id, c.artifact_id, c.type, c.version) == ("g", "a", "pom", "2.1")
        assert c.classifier is None

    def test_from_line_five_tokens(self):
        c = ArtifactCoordinate.from_line("g:a:jar:javadoc:2.1")
        assert c.classifier == "javadoc"
        assert c.version == "2.1"

    @pytest.mark.parametrize("line", ["g:a:jar", "g:a:jar:c:1.0:extra", ""])
    def test_from_line_bad_token_count(self, line):
        with pytest.raises(ValueError, match="Can not parse coordinates"):
            ArtifactCoordinate.from_line(line)

    def test_filename(self, make_coordinate):
        assert make_coordinate().filename == "core-1.0.jar"
        assert make_coordinate(classifier="sources").filename == "core-1.0-sources.jar"
        assert make_coordinate(type="pom").filename == "core-1.0.pom"

    def test_filename_maps_handler_types(self, make_coordinate):
        c = make_coordinate(type="test-jar", classifier="tests")
        assert c.filename == "core-1.0-tests.jar"

    def test_empty_classifier_shares_file_name(self, make_coordinate):
        # An empty classifier is not part of the file name, so the two
        # distinct coordinates locate the same file.
        assert make_coordinate(classifier="").filename == make_coordinate().filename
        assert make_coordinate(classifier="") != make_coordinate()

    def test_repository_path(self, make_coordinate):
        c = make_coordinate(group_id="org.example.lib")
        assert c.repository_path == "org/example/lib/core/1.0/core-1.0.jar"


class TestBuildProject:
    def test_manifest_filename(self):
        assert manifest_filename("bundle", "3.0") == "bundle-3.0-artifacts.txt"

    def test_manifest_path(self, tmp_path: Path):
        project = BuildProject(
            group_id="g", artifact_id="bundle", version="3.0", build_directory=tmp_path
        )
        assert project.manifest_path == tmp_path / "bundle-3.0-artifacts.txt"

    def test_coordinate_uses_packaging(self):
        project = BuildProject(group_id="g", artifact_id="a", version="1", packaging="pom")
        assert project.coordinate.to_line() == "g:a:pom:1"

    def test_load_json(self, tmp_path: Path, make_coordinate):
        project = BuildProject(
            group_id="g",
            artifact_id="a",
            version="1",
            build_directory=tmp_path / "target",
            artifacts=[AttachedArtifact(coordinate=make_coordinate(), file=tmp_path / "a.jar")],
            dependencies=[
                Dependency(coordinate=make_coordinate(), manifest_path=tmp_path / "x.txt")
            ],
        )
        path = tmp_path / "project.json"
        path.write_text(project.model_dump_json(), encoding="utf-8")
        assert BuildProject.load(path) == project


class TestRecordingProjectHelper:
    def test_satisfies_protocol(self):
        assert isinstance(RecordingProjectHelper(), ProjectHelper)

    def test_records_in_order(self, tmp_path: Path):
        helper = RecordingProjectHelper()
        project = BuildProject(group_id="g", artifact_id="a", version="1")
        helper.attach_artifact(project, tmp_path / "one.txt", "txt", "artifacts")
        helper.attach_artifact(project, tmp_path / "two.jar", "jar", None)
        assert [a.path.name for a in helper.attachments] == ["one.txt", "two.jar"]
        assert helper.attachments[1].classifier is None
