"""A small photo-sharing web application: upload, list and view images."""

from __future__ import annotations

import argparse
import functools
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from flask import Flask, Response, redirect, request, send_file

log = logging.getLogger(__name__)

_DEFAULT_PORT = 9080
_NOT_FOUND = ("404 page not found\n", 404, {"Content-Type": "text/plain; charset=utf-8"})


def _inside(base: Path, name: str) -> Path | None:
    """Return ``base / name`` if it stays within ``base``, else ``None``."""
    root = base.resolve()
    target = (root / name).resolve()
    if target != root and root not in target.parents:
        return None
    return target


def _load_templates(app: Flask, template_dir: Path) -> dict[str, Any]:
    """Compile every ``.html`` file in ``template_dir``, keyed by file name.

    Raises ``OSError`` if the directory cannot be read.
    """
    templates = {}
    for entry in sorted(template_dir.iterdir()):
        if entry.suffix != ".html":
            log.debug("skipping non-template %s", entry.name)
            continue
        log.debug("Loading template: %s", entry)
        templates[entry.name] = app.jinja_env.from_string(entry.read_text(encoding="utf-8"))
    return templates


def _safe(view: Callable[..., Any]) -> Callable[..., Any]:
    """Turn any error raised by ``view`` into a 500 response carrying its text."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return view(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001 - every failure becomes a 500
            log.warning("panic fired in %s: %s", view.__name__, exc)
            return Response(f"{exc}\n", status=500, content_type="text/plain; charset=utf-8")

    return wrapper


def create_app(
    upload_dir: str | Path = "./uploads",
    template_dir: str | Path = "./views",
    static_dir: str | Path = "./public",
) -> Flask:
    """Build the application.

    Templates are loaded once, here; raises ``OSError`` if ``template_dir``
    cannot be read.
    """
    uploads = Path(upload_dir)
    statics = Path(static_dir)
    app = Flask(__name__)
    templates = _load_templates(app, Path(template_dir))

    def render(name: str, **context: Any) -> str:
        key = name + ".html"
        if key not in templates:
            raise KeyError(f"template {key} is not loaded")
        return templates[key].render(**context)

    @app.route("/assets/", defaults={"name": ""})
    @app.route("/assets/<path:name>")
    def assets(name: str) -> Any:
        target = _inside(statics, name)
        if target is None or not target.is_file():
            return _NOT_FOUND
        return send_file(target)

    @_safe
    def list_images() -> Any:
        images = sorted(entry.name for entry in uploads.iterdir())
        return render("list", images=images)

    app.add_url_rule("/", "index", list_images)
    app.add_url_rule("/list", "list", list_images)

    @app.route("/view")
    @_safe
    def view() -> Any:
        image_id = request.args.get("id", "")
        target = _inside(uploads, image_id)
        if target is None or not target.is_file():
            return _NOT_FOUND
        return send_file(target, mimetype="image")

    @app.route("/upload", methods=["GET", "POST"])
    @_safe
    def upload() -> Any:
        if request.method == "GET":
            return render("upload")
        image = request.files.get("image")
        if image is None:
            raise ValueError("http: no such file")
        filename = os.path.basename(image.filename or "")
        if not filename:
            raise ValueError("uploaded file has no name")
        image.save(uploads / filename)
        return redirect("/view?id=" + filename, code=302)

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the photo application; returns the exit status."""
    parser = argparse.ArgumentParser(prog="photoweb", description="Photo sharing web server.")
    parser.add_argument("--port", type=int, default=_DEFAULT_PORT)
    parser.add_argument("--uploads", default="./uploads")
    parser.add_argument("--views", default="./views")
    parser.add_argument("--public", default="./public")
    args = parser.parse_args(argv)

    try:
        app = create_app(args.uploads, args.views, args.public)
        app.run(host="0.0.0.0", port=args.port)
    except OSError as exc:
        print("ListenAndServe: ", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())