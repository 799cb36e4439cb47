"""Unit tests for product file extractors."""

import pytest
from designos.loaders.extractors import (
    LineKind,
    classify_line,
    scan_lines,
    OverviewExtractor,
    RoadmapExtractor,
    DataModelExtractor,
    ShellExtractor,
    SectionSpecExtractor,
    ColorTokensExtractor,
    TypographyTokensExtractor,
)
from designos.loaders.errors import InvalidJSONError, ParsingError
from designos.loaders.models import (
    ColorTokens,
    Entity,
    Problem,
    ProductOverview,
    TypographyTokens,
)


class TestLineScanner:
    """Tests for line classification."""

    def test_classify_headings(self):
        assert classify_line("# Title") == (LineKind.TITLE, "Title")
        assert classify_line("## Section ") == (LineKind.SECTION, "Section")
        assert classify_line("### Sub item") == (LineKind.SUBITEM, "Sub item")

    def test_classify_list_item(self):
        assert classify_line("- item  ") == (LineKind.LIST_ITEM, "item")

    def test_classify_prose_and_blank(self):
        assert classify_line("  some text  ") == (LineKind.PROSE, "some text")
        assert classify_line("   ") == (LineKind.BLANK, "")

    def test_heading_without_space_is_prose(self):
        assert classify_line("#Title")[0] == LineKind.PROSE
        assert classify_line("####  Deep")[0] == LineKind.PROSE

    def test_scan_skips_blank_lines(self):
        lines = list(scan_lines("# A\n\n\nbody\r\n- item\n"))
        assert [line.kind for line in lines] == [
            LineKind.TITLE,
            LineKind.PROSE,
            LineKind.LIST_ITEM,
        ]
        assert [line.line_number for line in lines] == [1, 4, 5]

    def test_section_key_is_lowercase(self):
        line = next(scan_lines("## User Flows"))
        assert line.section_key == "user flows"


class TestOverviewExtractor:
    """Tests for OverviewExtractor."""

    @pytest.fixture
    def extractor(self):
        return OverviewExtractor()

    def test_basic_overview(self, extractor):
        content = "# MyApp\n## Overview\nDoes things.\n## Features\n- Fast\n- Simple\n"
        result = extractor.extract(content)
        assert result == ProductOverview(
            name="MyApp",
            description="Does things.",
            problems=[],
            features=["Fast", "Simple"],
        )

    def test_name_is_trimmed_heading(self, extractor):
        result = extractor.extract("#   Task Flow   \n")
        assert result.name == "Task Flow"

    def test_missing_title_fails(self, extractor):
        with pytest.raises(ParsingError, match="Missing product name"):
            extractor.extract("## Overview\nNo title here.\n", source="product/product-overview.md")

    def test_multiline_description_joined(self, extractor):
        content = """# App

## Overview
First line
  second line

third paragraph
"""
        result = extractor.extract(content)
        assert result.description == "First line second line third paragraph"

    def test_problems_pair_title_with_solution(self, extractor):
        content = """# App

## Problems

### Tasks get lost
Keep every task in one inbox.

### No focus
Show only today's tasks
on the home screen.
"""
        result = extractor.extract(content)
        assert result.problems == [
            Problem(title="Tasks get lost", solution="Keep every task in one inbox."),
            Problem(title="No focus", solution="Show only today's tasks on the home screen."),
        ]

    def test_problem_without_solution_dropped(self, extractor):
        content = "# App\n## Problems\n### Orphan\n## Features\n- One\n"
        result = extractor.extract(content)
        assert result.problems == []
        assert result.features == ["One"]

    def test_section_names_case_insensitive(self, extractor):
        content = "# App\n## FEATURES\n- Sync\n## overview\nText\n"
        result = extractor.extract(content)
        assert result.features == ["Sync"]
        assert result.description == "Text"

    def test_unknown_sections_ignored(self, extractor):
        content = "# App\n## Pricing\n- Free\nCheap.\n"
        result = extractor.extract(content)
        assert result.features == []
        assert result.description == ""

    def test_list_items_in_overview_ignored(self, extractor):
        content = "# App\n## Overview\nIntro.\n- bullet\n"
        result = extractor.extract(content)
        assert result.description == "Intro."


class TestRoadmapExtractor:
    """Tests for RoadmapExtractor."""

    @pytest.fixture
    def extractor(self):
        return RoadmapExtractor()

    def test_sections_in_order(self, extractor):
        content = """# Roadmap

## Task Lists
Create and organize tasks.

## Calendar View
See tasks by date.
"""
        result = extractor.extract(content)
        assert [s.id for s in result.sections] == ["task-lists", "calendar-view"]
        assert [s.title for s in result.sections] == ["Task Lists", "Calendar View"]
        assert [s.order for s in result.sections] == [0, 1]
        assert result.sections[1].description == "See tasks by date."

    def test_explicit_id(self, extractor):
        result = extractor.extract("## Project Setup {setup}\nInitial work.\n")
        section = result.sections[0]
        assert section.id == "setup"
        assert section.title == "Project Setup"

    def test_text_before_first_section_dropped(self, extractor):
        content = "# Roadmap\nIntro text.\n## First\nBody.\n"
        result = extractor.extract(content)
        assert len(result.sections) == 1
        assert result.sections[0].description == "Body."

    def test_list_items_join_description(self, extractor):
        content = "## First\nLead.\n- item one\n- item two\n"
        result = extractor.extract(content)
        assert result.sections[0].description == "Lead. item one item two"

    def test_empty_roadmap(self, extractor):
        result = extractor.extract("# Roadmap\n\nNothing planned yet.\n")
        assert result.sections == []

    def test_get_section(self, extractor):
        result = extractor.extract("## Alpha\n## Beta {b}\n")
        assert result.get_section("b").title == "Beta"
        assert result.get_section("missing") is None


class TestDataModelExtractor:
    """Tests for DataModelExtractor."""

    @pytest.fixture
    def extractor(self):
        return DataModelExtractor()

    def test_entities_and_relationships(self, extractor):
        content = """# Data Model

## Entities

### Task
A unit of work.
- Has a due date

### Project
Groups related tasks.

## Relationships
- Project has many Tasks
- Task belongs to one Project
"""
        result = extractor.extract(content)
        assert result.entities == [
            Entity(name="Task", description="A unit of work. Has a due date"),
            Entity(name="Project", description="Groups related tasks."),
        ]
        assert result.relationships == [
            "Project has many Tasks",
            "Task belongs to one Project",
        ]

    def test_entity_count_matches_headings(self, extractor):
        names = ["User", "Team", "Invite", "Role"]
        content = "## Entities\n" + "".join(f"### {name}\n" for name in names)
        result = extractor.extract(content)
        assert [e.name for e in result.entities] == names
        assert all(e.description == "" for e in result.entities)

    def test_subheadings_outside_entities_ignored(self, extractor):
        content = "## Entities\n### Task\nWork.\n## Notes\n### Not an entity\nText\n"
        result = extractor.extract(content)
        assert [e.name for e in result.entities] == ["Task"]
        assert result.entities[0].description == "Work."

    def test_prose_in_relationships_ignored(self, extractor):
        content = "## Relationships\nSome intro.\n- A has B\n"
        result = extractor.extract(content)
        assert result.relationships == ["A has B"]

    def test_get_entity_case_insensitive(self, extractor):
        result = extractor.extract("## Entities\n### Task\n")
        assert result.get_entity("task").name == "Task"
        assert result.get_entity("project") is None


class TestShellExtractor:
    """Tests for ShellExtractor."""

    @pytest.fixture
    def extractor(self):
        return ShellExtractor()

    def test_shell_spec(self, extractor):
        content = """# Application Shell

## Overview
Tab-based shell.
- Persistent header

## Navigation
- Home
- Projects
- Settings

## Layout
Sidebar on the left,
content on the right.
"""
        result = extractor.extract(content)
        assert result.raw == content
        assert result.overview == "Tab-based shell. Persistent header"
        assert result.navigation_items == ["Home", "Projects", "Settings"]
        assert result.layout_pattern == "Sidebar on the left, content on the right."

    def test_missing_sections_give_empty_values(self, extractor):
        result = extractor.extract("# Shell\n")
        assert result.overview == ""
        assert result.navigation_items == []
        assert result.layout_pattern == ""


class TestSectionSpecExtractor:
    """Tests for SectionSpecExtractor."""

    @pytest.fixture
    def extractor(self):
        return SectionSpecExtractor()

    def test_section_spec(self, extractor):
        content = """# Task List

## Overview
Shows all tasks.

## User Flows
- Add a task
- Complete a task

## UI Requirements
- Swipe to delete
"""
        result = extractor.extract(content)
        assert result.title == "Task List"
        assert result.overview == "Shows all tasks."
        assert result.user_flows == ["Add a task", "Complete a task"]
        assert result.ui_requirements == ["Swipe to delete"]
        assert result.use_shell is False

    def test_missing_title_is_empty(self, extractor):
        result = extractor.extract("## Overview\nText.\n")
        assert result.title == ""

    def test_use_shell_keyword_heuristic(self, extractor):
        assert extractor.extract("Use the app Shell for navigation.").use_shell is True
        assert extractor.extract("Standalone screen inside the shell.").use_shell is False


class TestDesignTokensExtractor:
    """Tests for color and typography token extractors."""

    def test_colors(self):
        content = '{"primary": "blue", "secondary": "teal", "neutral": "slate"}'
        result = ColorTokensExtractor().extract(content)
        assert result == ColorTokens(primary="blue", secondary="teal", neutral="slate")

    def test_typography_ignores_extra_keys(self):
        content = '{"heading": "Inter", "body": "Inter", "mono": "JetBrains Mono", "scale": 1.2}'
        result = TypographyTokensExtractor().extract(content)
        assert result == TypographyTokens(heading="Inter", body="Inter", mono="JetBrains Mono")

    def test_missing_key_fails_whole_record(self):
        content = '{"primary": "blue", "secondary": "teal"}'
        with pytest.raises(ParsingError, match="neutral"):
            ColorTokensExtractor().extract(content)

    def test_wrong_type_fails(self):
        content = '{"heading": "Inter", "body": 12, "mono": "Menlo"}'
        with pytest.raises(ParsingError, match="body"):
            TypographyTokensExtractor().extract(content)

    def test_invalid_json(self):
        with pytest.raises(InvalidJSONError):
            ColorTokensExtractor().extract("{not json", source="colors.json")

    def test_non_object_root(self):
        with pytest.raises(ParsingError, match="JSON object"):
            ColorTokensExtractor().extract('["blue", "teal", "slate"]')
