"""Tests for ProjectRepository CRUD, filtering and like toggling."""

import uuid
from datetime import datetime, timedelta

from showcase.database.models import ProjectLikeDB
from showcase.models.project import Project


def _project(base, **overrides):
    return Project(**{**base, "id": str(uuid.uuid4()), **overrides})


class TestProjectRepository:

    def test_create_project(self, project_repository, sample_project, author_uid):
        created = project_repository.create(sample_project)

        assert created.id == sample_project.id
        assert created.title == sample_project.title
        assert created.author_uid == author_uid
        assert created.likes == 0
        assert created.liked_by == []

    def test_create_ignores_incoming_likes(self, project_repository, sample_project_base):
        created = project_repository.create(_project(sample_project_base, likes=5, liked_by=["x"]))
        assert created.likes == 0
        assert created.liked_by == []

    def test_get_nonexistent_project(self, project_repository):
        assert project_repository.get("nonexistent-id") is None

    def test_get_all_sorted_newest_first(self, project_repository, sample_project_base):
        now = datetime.utcnow()
        project_repository.create(_project(sample_project_base, title="Old", created_at=now - timedelta(minutes=2)))
        project_repository.create(_project(sample_project_base, title="New", created_at=now))
        project_repository.create(_project(sample_project_base, title="Mid", created_at=now - timedelta(minutes=1)))

        titles = [p.title for p in project_repository.get_all()]
        assert titles == ["New", "Mid", "Old"]

    def test_filter_by_tag_is_exact_membership(self, project_repository, sample_project_base):
        project_repository.create(_project(sample_project_base, title="Py", tags=["python", "web"]))
        project_repository.create(_project(sample_project_base, title="PyLib", tags=["python-lib"]))
        project_repository.create(_project(sample_project_base, title="None", tags=[]))

        titles = [p.title for p in project_repository.get_all(tag="python")]
        assert titles == ["Py"]

    def test_search_matches_title_or_description_case_insensitively(self, project_repository, sample_project_base):
        project_repository.create(_project(sample_project_base, title="Weather App", description="forecasts"))
        project_repository.create(_project(sample_project_base, title="Chess", description="A WEATHER-proof engine"))
        project_repository.create(_project(sample_project_base, title="Todo", description="lists"))

        titles = sorted(p.title for p in project_repository.get_all(search="weather"))
        assert titles == ["Chess", "Weather App"]

    def test_search_folds_non_ascii_case(self, project_repository, sample_project_base):
        project_repository.create(_project(sample_project_base, title="Über Planner", description="x"))
        project_repository.create(_project(sample_project_base, title="Notes", description="Café ÉCOLE"))
        project_repository.create(_project(sample_project_base, title="Other", description="y"))

        assert [p.title for p in project_repository.get_all(search="über")] == ["Über Planner"]
        assert [p.title for p in project_repository.get_all(search="école")] == ["Notes"]

    def test_search_treats_wildcards_literally(self, project_repository, sample_project_base):
        project_repository.create(_project(sample_project_base, title="100% coverage"))
        project_repository.create(_project(sample_project_base, title="1000 stars"))

        titles = [p.title for p in project_repository.get_all(search="0%")]
        assert titles == ["100% coverage"]

    def test_tag_and_search_combine(self, project_repository, sample_project_base):
        project_repository.create(_project(sample_project_base, title="Rust CLI", tags=["rust"]))
        project_repository.create(_project(sample_project_base, title="Python CLI", tags=["python"]))
        project_repository.create(_project(sample_project_base, title="Python Web", tags=["web"]))

        titles = [p.title for p in project_repository.get_all(tag="python", search="cli")]
        assert titles == ["Python CLI"]

    def test_update_overwrites_given_fields(self, project_repository, sample_project):
        created = project_repository.create(sample_project)
        later = created.updated_at + timedelta(seconds=5)

        updated = project_repository.update(created.id, {"title": "Renamed", "tags": ["a", "b"], "updated_at": later})

        assert updated.title == "Renamed"
        assert updated.tags == ["a", "b"]
        assert updated.description == created.description
        assert updated.updated_at == later
        assert updated.created_at == created.created_at

    def test_update_missing_returns_none(self, project_repository):
        assert project_repository.update("missing", {"title": "x"}) is None

    def test_delete_project(self, project_repository, sample_project):
        created = project_repository.create(sample_project)

        assert project_repository.delete(created.id) is True
        assert project_repository.get(created.id) is None
        assert project_repository.delete(created.id) is False

    def test_delete_removes_likes(self, project_repository, sample_project, db_session):
        created = project_repository.create(sample_project)
        project_repository.toggle_like(created.id, "fan-1")

        project_repository.delete(created.id)

        assert db_session.query(ProjectLikeDB).filter(ProjectLikeDB.project_id == created.id).count() == 0


class TestToggleLike:

    def test_like_then_unlike(self, project_repository, sample_project):
        created = project_repository.create(sample_project)

        liked = project_repository.toggle_like(created.id, "u1")
        assert liked.likes == 1
        assert liked.liked_by == ["u1"]

        unliked = project_repository.toggle_like(created.id, "u1")
        assert unliked.likes == 0
        assert unliked.liked_by == []

    def test_likes_track_liked_by_across_users(self, project_repository, sample_project):
        created = project_repository.create(sample_project)

        for uid in ["a", "b", "c", "b"]:
            project = project_repository.toggle_like(created.id, uid)
            assert project.likes == len(project.liked_by)

        assert project.liked_by == ["a", "c"]
        assert project.likes == 2

    def test_even_number_of_toggles_restores_state(self, project_repository, sample_project):
        created = project_repository.create(sample_project)
        project_repository.toggle_like(created.id, "other")
        before = project_repository.get(created.id)

        for _ in range(4):
            project_repository.toggle_like(created.id, "u1")

        after = project_repository.get(created.id)
        assert after.likes == before.likes
        assert after.liked_by == before.liked_by

    def test_odd_number_of_toggles_flips_state(self, project_repository, sample_project):
        created = project_repository.create(sample_project)

        for _ in range(3):
            project = project_repository.toggle_like(created.id, "u1")

        assert project.liked_by == ["u1"]
        assert project.likes == 1

    def test_toggle_missing_project_returns_none(self, project_repository):
        assert project_repository.toggle_like("missing", "u1") is None

    def test_toggle_leaves_other_fields_alone(self, project_repository, sample_project):
        created = project_repository.create(sample_project)
        project = project_repository.toggle_like(created.id, "u1")

        assert project.title == created.title
        assert project.updated_at == created.updated_at
