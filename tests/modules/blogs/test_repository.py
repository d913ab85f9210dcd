import pytest
from postgrest.exceptions import APIError

from modules.auth.repository import AccountRepository
from modules.blogs.repository import BlogRepository, _contains_pattern, _quote
from shared.exceptions import DatabaseError


@pytest.fixture
def repository(fake_db):
    return BlogRepository(fake_db)


class TestBlogRepository:
    def test_create_and_get(self, repository):
        blog = repository.create("owner-1", "Title", "Body", "tech")
        assert blog.owner == "owner-1"
        assert blog.category == "tech"
        assert repository.get_by_id(blog.id) == blog

    def test_get_missing(self, repository):
        assert repository.get_by_id("00000000-0000-4000-8000-000000000000") is None

    def test_list_newest_first_with_count(self, repository):
        for i in range(5):
            repository.create("owner-1", f"Post {i}", "Body")

        blogs, total = repository.list_blogs(page=1, limit=2)

        assert total == 5
        assert [b.title for b in blogs] == ["Post 4", "Post 3"]

    def test_list_last_page(self, repository):
        for i in range(5):
            repository.create("owner-1", f"Post {i}", "Body")

        blogs, total = repository.list_blogs(page=3, limit=2)
        assert total == 5
        assert [b.title for b in blogs] == ["Post 0"]

    def test_list_filters(self, repository):
        repository.create("owner-1", "Python tips", "Body", "tech")
        repository.create("owner-2", "Cooking", "Use a PYTHON pan", "food")
        repository.create("owner-2", "Travel", "Body", "tech")

        _, total = repository.list_blogs(owner="owner-2")
        assert total == 2

        blogs, _ = repository.list_blogs(category="tech")
        assert {b.title for b in blogs} == {"Python tips", "Travel"}

        blogs, _ = repository.list_blogs(search="python")
        assert {b.title for b in blogs} == {"Python tips", "Cooking"}

        blogs, _ = repository.list_blogs(search="python", category="food")
        assert [b.title for b in blogs] == ["Cooking"]

    def test_search_with_filter_syntax_characters(self, repository):
        repository.create("owner-1", 'Say "hi", ok', "Body")
        blogs, _ = repository.list_blogs(search='"hi",')
        assert len(blogs) == 1

    @pytest.mark.parametrize(
        "search,expected",
        [
            ("%", ["100% cotton"]),
            ("_", ["snake_case tips"]),
            ("\\", ["C:\\temp"]),
            ("0%", ["100% cotton"]),
        ],
    )
    def test_search_wildcards_are_literal(self, repository, search, expected):
        for title in ["Spring sale", "100% cotton", "snake_case tips", "C:\\temp"]:
            repository.create("owner-1", title, "Body")

        blogs, total = repository.list_blogs(search=search)

        assert [b.title for b in blogs] == expected
        assert total == len(expected)

    def test_list_embeds_owner_profile(self, repository, fake_db):
        account = AccountRepository(fake_db).create("Jane", "jane@example.com", "$2b$hash")
        repository.create(account.id, "Hello", "Body")

        blogs, _ = repository.list_blogs()

        profile = blogs[0].owner_profile
        assert profile.model_dump() == {"id": account.id, "name": "Jane", "email": "jane@example.com"}
        assert "password_hash" not in blogs[0].model_dump_json()

    def test_get_by_id_has_no_owner_profile(self, repository):
        blog = repository.create("owner-1", "Title", "Body")
        assert repository.get_by_id(blog.id).owner_profile is None

    def test_update(self, repository):
        blog = repository.create("owner-1", "Old", "Body")
        updated = repository.update(blog.id, {"title": "New"})

        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.owner == "owner-1"

    def test_update_missing_returns_none(self, repository):
        assert repository.update("00000000-0000-4000-8000-000000000000", {"title": "x"}) is None

    def test_delete(self, repository):
        blog = repository.create("owner-1", "Title", "Body")
        assert repository.delete(blog.id) is True
        assert repository.get_by_id(blog.id) is None
        assert repository.delete(blog.id) is False

    def test_ping_failure(self, repository, fake_db):
        fake_db.fail_next = APIError({"code": "08006", "message": "connection failure"})
        with pytest.raises(DatabaseError):
            repository.ping()


def test_contains_pattern_escapes_wildcards():
    assert _contains_pattern("50%_off") == "%50\\%\\_off%"
    assert _contains_pattern("a\\b") == "%a\\\\b%"
    assert _contains_pattern("a*b") == "%a_b%"


def test_quote_escapes():
    assert _quote('a"b\\c') == '"a\\"b\\\\c"'
