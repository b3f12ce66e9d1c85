# main.py
import logging
import sys
from typing import Optional

from flask import Flask, current_app, jsonify, render_template, request
from jinja2 import TemplateError
from werkzeug.exceptions import BadRequest

import config
from aggregator import format_answer
from csv_parser import csv_to_table
from hf_connector import HFConnector
from models import DecodeError, JawabError, ParseError, TranslationError, UpstreamError

LOG = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
APP_LOGGERS = (__name__, "hf_connector", "csv_parser", "aggregator")

# failure kind -> pipeline stage, for the operator log line
STAGES = {
    DecodeError: "decode",
    ParseError: "csv",
    TranslationError: "translate",
    UpstreamError: "table-qa",
}


def configure_logging(level: str = config.DEFAULT_LOG_LEVEL):
    """
    Install the log format on the root logger and apply `level` to this app's module loggers.
    basicConfig is a no-op once the root logger has handlers (gunicorn, pytest).
    """
    lvl = getattr(logging, level, logging.INFO)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(lvl)


def decode_request() -> dict:
    """
    Read {"csv": str, "ask": str} from the request body. Missing fields default to "".
    """
    try:
        body = request.get_json(force=True)
    except BadRequest as e:
        raise DecodeError(f"request body is not valid JSON: {e.description}")
    if not isinstance(body, dict):
        raise DecodeError("request body must be a JSON object")

    fields = {}
    for name in ("csv", "ask"):
        value = body.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise DecodeError(f"field '{name}' must be a string")
        fields[name] = value
    return fields


def home():
    return render_template("index.html")


def jawab():
    connector = current_app.extensions["hf_connector"]
    try:
        req = decode_request()
        table = csv_to_table(req["csv"])
        translated = connector.translate(req["ask"])
        LOG.info("translated query: %r -> %r", req["ask"], translated)
        result = connector.ask_table(table, translated)
    except JawabError as e:
        stage = STAGES.get(type(e), "unknown")
        LOG.warning("jawab failed at %s: %s", stage, e)
        return jsonify({"success": False})

    body = result.to_dict()
    body["answer"] = format_answer(result)
    body["success"] = True
    return jsonify(body)


def template_error(e):
    LOG.error("landing page template failed: %s", e)
    return "", 500


def create_app(settings: Optional[config.Settings] = None,
               connector: Optional[HFConnector] = None) -> Flask:
    settings = settings or config.load_settings()
    configure_logging(settings.log_level)
    if not settings.token:
        LOG.warning("HUGGINGFACE_TOKEN is not set; inference calls will be rejected upstream")

    app = Flask(__name__)
    app.config["TEMPLATES_AUTO_RELOAD"] = True
    app.extensions["hf_connector"] = connector or HFConnector(settings)

    app.add_url_rule("/", "home", home, methods=["GET"])
    app.add_url_rule("/jawab", "jawab", jawab, methods=["POST"])
    app.register_error_handler(TemplateError, template_error)
    return app


if __name__ == "__main__":
    settings = config.load_settings()
    if not settings.token:
        configure_logging(settings.log_level)
        LOG.error("HUGGINGFACE_TOKEN is not set")
        sys.exit(1)

    server = create_app(settings)
    LOG.info("Registered routes:")
    for r in sorted([rule.rule for rule in server.url_map.iter_rules()]):
        LOG.info("  %s", r)
    LOG.info("Server berjalan di %s:%d", settings.host, settings.port)
    server.run(host=settings.host, port=settings.port)
