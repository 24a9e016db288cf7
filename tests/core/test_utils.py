from src.core.utils.utils import convert_path_to_model, get_app_paths


def test_model_modules_discovered_for_blog_app():
    paths = get_app_paths("models")

    assert set(paths["blog"]) == {"category", "comment", "post"}


def test_app_paths_are_cached():
    assert get_app_paths("models") is get_app_paths("models")


def test_convert_path_to_model():
    post_path = get_app_paths("models")["blog"]["post"]

    assert convert_path_to_model(post_path) == "src.apps.blog.models.post"
