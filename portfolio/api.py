"""
API Blueprint - resume upload to portfolio profile
"""
import os
import re

from flask import Blueprint, Response, current_app, request
from werkzeug.exceptions import BadRequest

from portfolio.errors import ClientInputError
from portfolio.prompts import build_prompt
from portfolio.services.extract_service import DocumentFormat, extract_text
from portfolio.services.gemini_service import GeminiClient
from portfolio.utils.staging import staged_upload

api_bp = Blueprint("api", __name__)

RESUME_FIELD = "resume"


def get_resume_upload():
    """Return the uploaded ``resume`` FileStorage or raise ClientInputError."""
    if request.mimetype != "multipart/form-data":
        raise ClientInputError("Invalid multipart form")
    try:
        upload = request.files.get(RESUME_FIELD)
    except BadRequest as e:
        raise ClientInputError("Invalid multipart form") from e
    if upload is None or not upload.filename:
        raise ClientInputError(f"Missing '{RESUME_FIELD}' file field")
    return upload


# ============ API Routes ============

@api_bp.route("/generate", methods=["POST", "OPTIONS"])
def generate():
    if request.method == "OPTIONS":
        return Response(status=204)

    # Missing configuration is reported before the upload is read.
    client = GeminiClient.from_config(current_app.config)

    upload = get_resume_upload()
    fmt = DocumentFormat.from_filename(upload.filename)
    current_app.logger.info("Received %s upload (%s)", fmt.name, upload.filename)

    suffix = os.path.splitext(upload.filename)[1].lower()
    if not re.fullmatch(r"\.[a-z0-9]{1,10}", suffix):
        suffix = ""
    with staged_upload(upload, suffix=suffix, directory=current_app.config.get("UPLOAD_TMP_DIR")) as path:
        resume_text = extract_text(path, fmt)

    prompt = build_prompt(resume_text)
    body = client.generate(prompt)
    return Response(body, status=200, mimetype="application/json")
