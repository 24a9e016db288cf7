import asyncio
import typer

from src.core.config import settings
from src.core.database import database
from src.core.exceptions import ServiceException
from src.core.observability import setup_logging
from src.apps.blog.container import BlogServices

app = typer.Typer(help="Management commands for the blog backend.")


# ---------------------------
# Helpers
# ---------------------------
def get_services() -> BlogServices:
    return BlogServices.build(database.get_session)


def run(coro):
    """Run a coroutine and dispose the engine afterwards."""
    async def _runner():
        try:
            return await coro
        finally:
            await database.disconnect()

    try:
        return asyncio.run(_runner())
    except ServiceException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)


@app.callback()
def main():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db():
    """Create all tables and the default category."""
    run(database.create_all())
    default = run(get_services().categories.ensure_default_category())
    print(f"✅ Tables created on {database.url}")
    print(f"📁 Default category {default.id}: {default.name}")


@app.command()
def drop_db(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation")
):
    """Drop all tables."""
    if not yes:
        typer.confirm("Drop every table?", abort=True)
    run(database.drop_all())
    print("✅ Tables dropped")


@app.command()
def create_category(name: str):
    """Create a category."""
    category = run(get_services().categories.create_category(name))
    print(f"✅ Created category {category.id}: {category.name}")


@app.command()
def list_categories():
    """List all categories."""
    categories = run(get_services().categories.get_category_all())
    if not categories:
        print("📁 No categories found.")
        return

    print("📁 Categories:")
    for category in categories:
        marker = " (default)" if category.is_default else ""
        print(f"  🏷️  {category.id}: {category.name}{marker}")


@app.command()
def list_posts(
    deleted: bool = typer.Option(False, "--deleted", help="List soft deleted posts")
):
    """List active (or soft deleted) posts."""
    posts = run(get_services().posts.view_posts(deleted))
    if not posts:
        print("📄 No posts found.")
        return

    for post in posts:
        print(f"  📄 {post.id}: {post.title} (category={post.category_id}, views={post.view})")


@app.command()
def purge_post(post_id: int):
    """Permanently delete a post and its comments."""
    removed = run(get_services().post_comments.delete_post(post_id))
    print(f"🗑️  Post {post_id} deleted with {removed} comment(s)")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
