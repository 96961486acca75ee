from __future__ import annotations

import logging
from dataclasses import asdict, fields
from typing import Mapping, Optional

from flask import Flask, jsonify, request
from .config import MAX_PIXEL_WIDTH, MIN_PIXEL_WIDTH, SETTINGS, configure_logging
from .errors import PixelationError
from .infrastructure.cache import CACHE
from .infrastructure.palettes import BUILTIN_PALETTES, parse_palette, rgb_to_hex
from .infrastructure.responses import encode_png, send_png_bytes
from .infrastructure.sources import FETCHER, decode_image, load_pixels
from .processing.pipeline import DitherAlgorithm, OutputMode, PipelineConfig, pixelate, validate

APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def resolve_source_url(args: Mapping[str, str]) -> Optional[str]:
    """Pick the upstream image URL from ``source_url`` or ``source_base`` + ``source_path``."""
    direct = args.get("source_url")
    if direct:
        return direct
    base = args.get("source_base")
    path = args.get("source_path")
    if base and path:
        return f"{base.rstrip('/')}/{path.lstrip('/')}"
    return None


def build_config(args: Mapping[str, str]) -> PipelineConfig:
    config = PipelineConfig.from_options(
        width=args.get("width", SETTINGS.default_width),
        dither=args.get("dither", SETTINGS.default_dither),
        strength=args.get("strength", SETTINGS.default_strength),
        palette=parse_palette(args.get("palette", SETTINGS.default_palette)),
        resolution=args.get("resolution", SETTINGS.default_resolution),
    )
    validate(config)
    return config


def check_default(name: str, value: object) -> None:
    """Reject a settings value that would make every default render fail."""
    if name == "default_dither":
        DitherAlgorithm.parse(str(value))
    elif name == "default_resolution":
        OutputMode.parse(str(value))
    elif name == "default_palette":
        parse_palette(str(value))
    elif name == "default_width":
        validate(PipelineConfig(target_width=value))
    elif name == "default_strength":
        validate(PipelineConfig(target_width=MIN_PIXEL_WIDTH, strength=value))


def _cache_key(args: Mapping[str, str]) -> tuple:
    return tuple(sorted(args.items()))


def create_app() -> Flask:
    configure_logging()
    app = Flask(__name__)

    @app.route("/pixelate", methods=["GET", "POST"])
    def pixelate_image():
        params = dict(request.args.items())
        if request.method == "POST":
            params.update(request.form.items())

        try:
            config = build_config(params)
        except PixelationError as exc:
            return (f"Invalid request: {exc}", 400)

        key = _cache_key(params)
        if request.method == "GET":
            cached = CACHE.get(key)
            if cached is not None:
                return send_png_bytes(cached)

        try:
            upload = request.files.get("image")
            if upload is not None:
                source = load_pixels(decode_image(upload.read()))
            else:
                url = resolve_source_url(params)
                if url is None:
                    return ("Missing image upload or source_url", 400)
                source = load_pixels(url, FETCHER)
        except (RuntimeError, OSError) as exc:
            logger.warning("Image source failed: %s", exc)
            return (f"Source Error: {exc}", 502)

        try:
            out = pixelate(source, config)
        except PixelationError as exc:
            return (f"Invalid request: {exc}", 400)

        data = encode_png(out)
        if request.method == "GET":
            CACHE.put(key, data)
        return send_png_bytes(data)

    @app.route("/palettes")
    def palettes():
        return jsonify(
            {name: [rgb_to_hex(color) for color in colors] for name, colors in BUILTIN_PALETTES.items()}
        )

    @app.route("/health")
    def health():
        return jsonify(
            ok=True,
            version=APP_VERSION,
            dithers=[algorithm.value for algorithm in DitherAlgorithm],
            min_width=MIN_PIXEL_WIDTH,
            max_width=MAX_PIXEL_WIDTH,
        )

    @app.route("/settings", methods=["GET", "PATCH"])
    def settings_view():
        if request.method == "GET":
            return jsonify(asdict(SETTINGS))

        payload = request.get_json(silent=True) or {}
        errors: dict[str, str] = {}
        applied: dict[str, object] = {}

        for field in fields(SETTINGS):
            if field.name not in payload:
                continue

            raw_value = payload[field.name]
            try:
                if field.type is int:
                    coerced = int(raw_value)
                elif field.type is float:
                    coerced = float(raw_value)
                else:
                    coerced = str(raw_value)
            except (TypeError, ValueError):
                errors[field.name] = f"Expected {field.type.__name__}"
                continue

            if field.name in ("default_dither", "default_resolution"):
                coerced = str(coerced).lower()

            try:
                check_default(field.name, coerced)
            except PixelationError as exc:
                errors[field.name] = str(exc)
                continue

            setattr(SETTINGS, field.name, coerced)
            applied[field.name] = coerced

        if applied:
            CACHE.clear()

        status = 400 if errors else 200
        return (
            jsonify(updated=applied, errors=errors, settings=asdict(SETTINGS)),
            status,
        )

    return app


app = create_app()
application = app
