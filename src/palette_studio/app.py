from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Optional

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from .colors import canon_hex, contrast_color, contrast_report
from .config import Settings
from .export import ExportFormat, export_palette
from .extract import extract_colors_from_image
from .gradient import (
    Gradient,
    generate_random_gradient,
    gradient_css,
    gradient_from_palette,
    sample_gradient,
)
from .harmony import default_rng, generate_harmonious_colors
from .palette import USE_CASES, Palette, generate_palette, parse_use_case, regenerate_palette
from .premade import premade_palettes

log = logging.getLogger(__name__)


def _rng() -> random.Random:
    """Seeded generator when ?seed= is given, system randomness otherwise."""
    seed = request.args.get("seed")
    if seed is None:
        return default_rng()
    try:
        return random.Random(int(seed))
    except ValueError:
        raise ValueError("seed must be an integer") from None


def _int_arg(name: str, default: int, lo: int, hi: int) -> int:
    raw = request.args.get(name, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer") from None
    return max(lo, min(value, hi))


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object body")
    return data


def _palette_from_body(data: dict[str, Any]) -> Palette:
    try:
        palette = Palette.from_dict(data.get("palette", data))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"invalid palette: {exc}") from exc
    for c in palette.colors:
        canon_hex(c.hex)
    return palette


# ----------------------------- Flask app ----------------------------------


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )
    extractor_settings = settings.extractor()

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def server_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return jsonify({"error": exc.description}), exc.code
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/use-cases")
    def use_cases():
        return jsonify(
            [
                {"id": uc.value, "name": cfg.title, "description": cfg.description}
                for uc, cfg in USE_CASES.items()
            ]
        )

    @app.route("/palette")
    def palette():
        use_case = parse_use_case(request.args.get("use_case", "branding"))
        return jsonify(generate_palette(use_case, rng=_rng()).to_dict())

    @app.route("/palette/regenerate", methods=["POST"])
    def palette_regenerate():
        data = _json_body()
        previous = _palette_from_body(data)
        locks = data.get("locks") or [False] * len(previous.colors)
        if not isinstance(locks, list):
            raise ValueError("locks must be a list of booleans")
        fresh = regenerate_palette(previous, [bool(x) for x in locks], rng=_rng())
        return jsonify(fresh.to_dict())

    @app.route("/premade")
    def premade():
        category = request.args.get("category")
        return jsonify([p.to_dict() for p in premade_palettes(category)])

    @app.route("/harmony")
    def harmony():
        base = _int_arg("base", 0, -100000, 100000)
        count = _int_arg("count", 5, 1, 64)
        scheme = request.args.get("scheme", "analogous")
        return jsonify(generate_harmonious_colors(base, count, scheme, rng=_rng()))

    @app.route("/contrast")
    def contrast():
        fg = canon_hex(request.args.get("fg", "000000"))
        bg = canon_hex(request.args.get("bg", "ffffff"))
        report = contrast_report(fg, bg)
        report["textOnBackground"] = contrast_color(bg)
        return jsonify(report)

    @app.route("/gradient/random")
    def gradient_random():
        g = generate_random_gradient(rng=_rng())
        return jsonify({**g.to_dict(), "css": gradient_css(g)})

    @app.route("/gradient/css", methods=["POST"])
    def gradient_to_css():
        g = Gradient.from_dict(_json_body())
        return jsonify({"css": gradient_css(g)})

    @app.route("/gradient/from-palette", methods=["POST"])
    def gradient_palette():
        g = gradient_from_palette(_palette_from_body(_json_body()), rng=_rng())
        return jsonify({**g.to_dict(), "css": gradient_css(g)})

    @app.route("/gradient/sample", methods=["POST"])
    def gradient_sample():
        g = Gradient.from_dict(_json_body())
        steps = _int_arg("n", 11, 2, 512)
        return jsonify(sample_gradient(g, steps))

    @app.route("/extract", methods=["POST"])
    def extract():
        count = _int_arg("count", 5, 1, 32)
        upload = request.files.get("image")
        if upload is not None:
            source: Any = upload.read()
        else:
            source = str(_json_body().get("url") or "")
            if not source:
                raise ValueError("provide an 'image' file or a JSON 'url'")
        colors = asyncio.run(
            extract_colors_from_image(
                source, count, rng=_rng(), settings=extractor_settings
            )
        )
        return jsonify([c.to_dict() for c in colors])

    @app.route("/export", methods=["POST"])
    def export():
        fmt = (request.args.get("format") or "css").lower()
        text = export_palette(_palette_from_body(_json_body()), fmt)
        mimetype = "application/json" if fmt == ExportFormat.JSON.value else "text/plain"
        return Response(text, mimetype=mimetype)

    return app


def main() -> None:
    settings = Settings()
    create_app(settings).run(host=settings.host, port=settings.port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
