"""Settings defaults and derived values."""
from catalog.core.config import Settings


def _settings(**kw):
    base = dict(
        MONGO_URI="mongodb://localhost:27017",
        CLOUDINARY_CLOUD_NAME="c",
        CLOUDINARY_API_KEY="k",
        CLOUDINARY_API_SECRET="s",
    )
    base.update(kw)
    return Settings(**base)


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    s = _settings()
    assert s.PORT == 5000
    assert s.max_upload_files == 10
    assert s.upload_folder == "products"
    assert s.allowed_origins == ["*"]


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert _settings().PORT == 8080


def test_allowed_origins_csv():
    s = _settings(ALLOWED_ORIGINS="https://a.example, https://b.example,")
    assert s.allowed_origins == ["https://a.example", "https://b.example"]


def test_image_store_configured():
    assert _settings().image_store_configured is True
    assert _settings(CLOUDINARY_API_SECRET="").image_store_configured is False
