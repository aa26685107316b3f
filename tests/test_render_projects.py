from folio.core.models import Project, parse_records
from folio.core.nodes import Element
from folio.render.projects import UNDATED_HEADING, render_projects


def _render(projects: list[Project]) -> Element:
    container = Element("section")
    render_projects(container, projects)
    return container


def test_year_headings_precede_items_newest_first() -> None:
    container = _render(
        [
            Project(title="A", date="2023-05-01"),
            Project(title="B", date="2024-01-01"),
        ]
    )

    sequence = [
        child.text_content if child.tag == "h2" else child.find_all("a", "project-title")[0].text_content
        for child in container.elements
    ]
    assert sequence == ["2024", "B", "2023", "A"]


def test_sorts_input_in_place_and_one_heading_per_year() -> None:
    projects = parse_records(
        Project,
        [
            {"title": "Old", "date": "2021-02-01"},
            {"title": "Mid", "date": "2023-03-01"},
            {"title": "New", "date": "2023-11-20"},
            {"title": "Older", "date": "2021-01-15"},
        ],
    )

    container = _render(projects)

    assert [project.title for project in projects] == ["New", "Mid", "Old", "Older"]
    headings = [heading.text_content for heading in container.find_all("h2")]
    assert headings == ["2023", "2021"]
    dates = [item.find_all("span", "project-date")[0].text_content for item in container.find_all("div", "project-item")]
    assert dates == ["Nov 20, 2023", "Mar 1, 2023", "Feb 1, 2021", "Jan 15, 2021"]


def test_link_attributes_with_and_without_link() -> None:
    container = _render(
        [
            Project(title="Linked", description="has link", date="2024-02-01", link="https://example.com"),
            Project(title="Plain", description="no link", date="2024-01-01"),
        ]
    )

    linked, plain = container.find_all("a", "project-title")
    assert linked.attrs == {"href": "https://example.com", "target": "_blank", "rel": "noopener noreferrer"}
    assert plain.attrs == {"href": "#", "target": "_self", "rel": ""}
    descriptions = [item.find_all("p")[0].text_content for item in container.find_all("div", "project-item")]
    assert descriptions == ["has link", "no link"]


def test_headings_do_not_carry_over_between_calls() -> None:
    container = Element("section")
    render_projects(container, [Project(title="A", date="2024-01-01")])
    render_projects(container, [Project(title="B", date="2024-06-01")])

    assert [heading.text_content for heading in container.find_all("h2")] == ["2024", "2024"]
    assert len(container.find_all("div", "project-item")) == 2


def test_undated_projects_sort_last_under_one_heading() -> None:
    container = _render(
        [
            Project(title="Unknown"),
            Project(title="Dated", date="2022-07-04"),
            Project(title="Garbage", date="soon"),
        ]
    )

    assert [heading.text_content for heading in container.find_all("h2")] == ["2022", UNDATED_HEADING]
    titles = [link.text_content for link in container.find_all("a", "project-title")]
    assert titles == ["Dated", "Unknown", "Garbage"]


def test_partial_dates_group_under_their_year() -> None:
    container = _render(
        [
            Project(title="Month", date="2024-03"),
            Project(title="Year", date="2023"),
            Project(title="Day", date="2024-05-10"),
        ]
    )

    assert [heading.text_content for heading in container.find_all("h2")] == ["2024", "2023"]
    titles = [link.text_content for link in container.find_all("a", "project-title")]
    assert titles == ["Day", "Month", "Year"]
