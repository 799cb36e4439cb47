"""Integration tests for loading a complete product tree."""

import json
from pathlib import Path

import pytest

from designos import load_project
from designos.cli import main
from designos.loaders import ProductLoader, SectionLoader


OVERVIEW = """# TaskFlow

## Overview
TaskFlow keeps a small team's work in one place.

## Problems

### Tasks get lost
A single inbox collects every task.

### Nobody knows what is due
A calendar shows deadlines at a glance.

## Features
- Shared task lists
- Calendar view
- Reminders
"""

ROADMAP = """# Product Roadmap

## Task Lists {tasks}
Create, assign and complete tasks.

## Calendar
See tasks by due date.
"""

DATA_MODEL = """# Data Model

## Entities

### Task
A unit of work with a due date.

### Member
A person on the team.

## Relationships
- Member has many Tasks
"""

SHELL = """# Application Shell

## Overview
Tab bar at the bottom.

## Navigation
- Tasks
- Calendar

## Layout
Single column.
"""

SECTION_SPEC = """# Task Lists

## Overview
All open tasks grouped by list.

## User Flows
- Add a task
- Complete a task

## UI Requirements
- Pull to refresh

Use the shell navigation.
"""


def write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def project(tmp_path):
    """A fully populated product tree."""
    product = tmp_path / "product"
    write(product / "product-overview.md", OVERVIEW)
    write(product / "product-roadmap.md", ROADMAP)
    write(product / "data-model" / "data-model.md", DATA_MODEL)
    write(product / "design-system" / "colors.json", json.dumps(
        {"primary": "indigo", "secondary": "amber", "neutral": "slate"}
    ))
    write(product / "design-system" / "typography.json", json.dumps(
        {"heading": "Inter", "body": "Inter", "mono": "JetBrains Mono"}
    ))
    write(product / "shell" / "spec.md", SHELL)
    (product / "shell" / "components").mkdir()

    tasks = product / "sections" / "tasks"
    write(tasks / "spec.md", SECTION_SPEC)
    write(tasks / "data.json", json.dumps({"tasks": [{"id": 1, "title": "Plan sprint"}]}))
    write(tasks / "designs" / "TaskList.swift", "struct TaskList {}")
    write(tasks / "screenshots" / "task-list.png", "png")

    (product / "sections" / "calendar").mkdir()
    return tmp_path


class TestLoadProject:
    """End-to-end loading through the public API."""

    def test_all_pieces_loaded(self, project):
        data = load_project(project)

        assert data.overview.name == "TaskFlow"
        assert len(data.overview.problems) == 2
        assert data.overview.features == ["Shared task lists", "Calendar view", "Reminders"]

        assert [s.id for s in data.roadmap.sections] == ["tasks", "calendar"]
        assert data.roadmap.sections[0].title == "Task Lists"

        assert [e.name for e in data.data_model.entities] == ["Task", "Member"]
        assert data.data_model.relationships == ["Member has many Tasks"]

        assert data.design_system.colors.primary == "indigo"
        assert data.design_system.typography.mono == "JetBrains Mono"

        assert data.shell.spec.navigation_items == ["Tasks", "Calendar"]
        assert data.shell.spec.layout_pattern == "Single column."
        assert data.shell.has_components is True

    def test_loading_twice_is_equal(self, project):
        assert load_project(project) == load_project(project)

    def test_all_phases_complete(self, project):
        statuses = ProductLoader(project_root=project).get_phase_status()
        assert all(status.complete for status in statuses)

    def test_sections(self, project):
        loader = SectionLoader(project_root=project)
        assert loader.get_all_section_ids() == ["calendar", "tasks"]

        tasks = loader.load_section_data("tasks")
        assert tasks.spec_parsed.title == "Task Lists"
        assert tasks.spec_parsed.use_shell is True
        assert tasks.data["tasks"][0]["title"] == "Plan sprint"
        assert tasks.screen_designs[0].component_name == "TaskList"
        assert tasks.screenshots[0].name == "task-list"

        calendar = loader.load_section_data("calendar")
        assert not calendar.has_spec
        assert calendar.screen_designs == []


class TestCli:
    """Tests for the designos command line."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_load(self, project, capsys):
        assert main(["--root", str(project), "load"]) == 0
        result = json.loads(capsys.readouterr().out)

        assert result["overview"]["name"] == "TaskFlow"
        assert result["roadmap"]["sections"][1]["id"] == "calendar"
        assert result["design_system"]["colors"]["neutral"] == "slate"
        assert "sections" not in result

    def test_load_with_sections_to_file(self, project, tmp_path):
        output = tmp_path / "out" / "product.json"
        code = main(["--root", str(project), "load", "--with-sections", "-o", str(output)])

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert [s["section_id"] for s in result["sections"]] == ["calendar", "tasks"]

    def test_load_empty_project(self, tmp_path, capsys):
        assert main(["--root", str(tmp_path), "load"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["overview"] is None
        assert result["shell"] is None

    def test_sections(self, project, capsys):
        assert main(["--root", str(project), "sections"]) == 0
        assert capsys.readouterr().out.split() == ["calendar", "tasks"]

    def test_section(self, project, capsys):
        assert main(["--root", str(project), "--indent", "4", "section", "tasks"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["spec_parsed"]["user_flows"] == ["Add a task", "Complete a task"]

    def test_unknown_section(self, project):
        assert main(["--root", str(project), "section", "missing"]) == 1

    def test_section_id_cannot_leave_sections_dir(self, project, capsys):
        assert main(["--root", str(project), "section", ".."]) == 1
        assert main(["--root", str(project), "section", "../shell"]) == 1
        assert capsys.readouterr().out == ""

    def test_status(self, tmp_path, capsys):
        write(tmp_path / "product" / "product-overview.md", OVERVIEW)
        write(tmp_path / "product" / "product-roadmap.md", ROADMAP)

        assert main(["--root", str(tmp_path), "status"]) == 0
        out = capsys.readouterr().out
        assert "Product" in out
        assert "Data Model" in out
        assert "1/5 phases complete" in out

    def test_missing_config_file(self, tmp_path, capsys):
        code = main(["-c", str(tmp_path / "nope.yaml"), "sections"])
        assert code == 1
        assert "ERROR" in capsys.readouterr().err
