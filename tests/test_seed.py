# tests/test_seed.py
from roster import create_app
from roster.seed import load_seed_names, seed_members_from_yaml


def write_seed(path, body):
    path.write_text(body, encoding="utf-8")
    return path


def test_seed_into_missing_store(tmp_path, store):
    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n  - Maren\n")
    assert seed_members_from_yaml(store, seed) == 2
    assert store.load_all() == ["Anja", "Maren"]


def test_seed_skips_existing_store(tmp_path, members_file, store):
    members_file.write_text("Monsta")
    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n")
    assert seed_members_from_yaml(store, seed) == 0
    assert store.load_all() == ["Monsta"]


def test_seed_force_overwrites(tmp_path, members_file, store):
    members_file.write_text("Monsta")
    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n")
    assert seed_members_from_yaml(store, seed, force=True) == 1
    assert store.load_all() == ["Anja"]


def test_seed_file_missing_or_invalid(tmp_path, store):
    assert load_seed_names(tmp_path / "nope.yml") == []
    assert load_seed_names(write_seed(tmp_path / "list.yml", "- Anja\n")) == []
    assert load_seed_names(write_seed(tmp_path / "empty.yml", "")) == []
    assert seed_members_from_yaml(store, tmp_path / "nope.yml") == 0
    assert store.exists() is False


def test_seed_names_are_text(tmp_path):
    seed = write_seed(tmp_path / "members.yml", "members:\n  - 1984\n  - Anja\n")
    assert load_seed_names(seed) == ["1984", "Anja"]


def test_create_app_seeds_new_store(tmp_path, monkeypatch, members_file):
    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n  - Maren\n")
    monkeypatch.setenv("MEMBERS_SEED_FILE", str(seed))

    app = create_app()
    rv = app.test_client().get("/members")
    assert '<a href="/members/Maren">Maren</a>' in rv.get_data(as_text=True)
    assert members_file.read_text() == "Anja\nMaren"


def test_seed_members_command(tmp_path, monkeypatch, members_file):
    members_file.write_text("Monsta")
    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n")
    monkeypatch.setenv("MEMBERS_SEED_FILE", str(seed))

    app = create_app()
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-members"])
    assert "Seeded 0 members" in result.output
    assert members_file.read_text() == "Monsta"

    result = runner.invoke(args=["seed-members", "--force"])
    assert "Seeded 1 members" in result.output
    assert members_file.read_text() == "Anja"


def test_seed_members_must_be_a_list(tmp_path, store):
    seed = write_seed(tmp_path / "members.yml", "members: Anja\n")
    assert load_seed_names(seed) == []
    assert seed_members_from_yaml(store, seed) == 0
    assert store.exists() is False


def test_seed_drops_empty_and_duplicate_names(tmp_path):
    seed = write_seed(
        tmp_path / "members.yml",
        'members:\n  - Anja\n  - ""\n  - Maren\n  - Anja\n  -\n',
    )
    assert load_seed_names(seed) == ["Anja", "Maren"]


def test_delete_unknown_member_keeps_seeding_enabled(
    tmp_path, monkeypatch, members_file
):
    app = create_app()
    rv = app.test_client().delete("/members/Nobody")
    assert rv.status_code == 302
    assert not members_file.exists()

    seed = write_seed(tmp_path / "members.yml", "members:\n  - Anja\n")
    monkeypatch.setenv("MEMBERS_SEED_FILE", str(seed))
    create_app()
    assert members_file.read_text() == "Anja"
