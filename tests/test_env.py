from src.utils import env
from src.utils.env import Settings, load_env


def test_settings_defaults(monkeypatch):
    for name in ('LOG_LEVEL', 'LIFESCORE_TIMEZONE', 'ACHIEVEMENT_TRACING'):
        monkeypatch.delenv(name, raising=False)

    assert Settings.from_env() == Settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    monkeypatch.setenv('LIFESCORE_TIMEZONE', 'Asia/Tbilisi')
    monkeypatch.setenv('ACHIEVEMENT_TRACING', 'yes')

    settings = Settings.from_env()

    assert settings.log_level == 'DEBUG'
    assert settings.timezone == 'Asia/Tbilisi'
    assert settings.tracing is True


def test_load_env_prefers_stage_file(tmp_path, monkeypatch):
    (tmp_path / '.env.prod').write_text('LIFESCORE_TIMEZONE=Europe/Berlin\n')
    (tmp_path / '.env').write_text('LIFESCORE_TIMEZONE=UTC\n')
    monkeypatch.setattr(env, '_find_project_root', lambda: tmp_path)
    monkeypatch.delenv('ENV_FILE', raising=False)
    monkeypatch.setenv('LIFESCORE_ENV', 'production')
    # recorded first so the loaded value is removed again on teardown
    monkeypatch.setenv('LIFESCORE_TIMEZONE', '')
    monkeypatch.delenv('LIFESCORE_TIMEZONE')

    assert load_env() == tmp_path / '.env.prod'
    assert Settings.from_env().timezone == 'Europe/Berlin'


def test_load_env_without_files(tmp_path, monkeypatch):
    monkeypatch.setattr(env, '_find_project_root', lambda: tmp_path)
    monkeypatch.delenv('ENV_FILE', raising=False)

    assert load_env() is None
