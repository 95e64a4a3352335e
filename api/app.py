import os
import sys
import logging

from flask import Flask, request, jsonify
from pydantic import ValidationError

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from correction_feedback.alignment.config import AlignmentConfig, LOOKAHEAD_WINDOW
from correction_feedback.report_generator import generate_feedback_report
from api.schemas import CompareRequest, CompareResponse

LOG_LEVEL = os.getenv("CORRECTION_LOG_LEVEL", "INFO")
ALIGNMENT_CONFIG = AlignmentConfig(
    lookahead_window=int(os.getenv("CORRECTION_LOOKAHEAD_WINDOW", str(LOOKAHEAD_WINDOW)))
)


def configure_logging(level=LOG_LEVEL):
    """Apply the log level to the root handler and the project loggers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for name in ("correction_feedback", "api"):
        logging.getLogger(name).setLevel(level)


configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)


# ============================================================================
# ROUTES - HEALTH
# ============================================================================
@app.route('/health', methods=['GET'])
def health_check():
    return jsonify({"status": "ok"})


# ============================================================================
# ROUTES - COMPARISON
# ============================================================================
@app.route('/api/compare', methods=['POST'])
def compare():
    """Align the learner's corrected text against the reference text."""
    data = request.get_json(silent=True)
    if data is None:
        logger.warning("Rejected /api/compare: body is not JSON")
        return jsonify({"error": "Request body must be JSON", "details": []}), 400

    try:
        payload = CompareRequest.model_validate(data)
    except ValidationError as e:
        details = [
            {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
            for err in e.errors()
        ]
        logger.warning("Rejected /api/compare: %d validation error(s)", len(details))
        return jsonify({"error": "Invalid request", "details": details}), 400

    report = generate_feedback_report(
        payload.user_text,
        payload.reference_text,
        format_user=payload.format_user_text,
        config=ALIGNMENT_CONFIG,
    )
    response = CompareResponse.model_validate(report)
    return jsonify(response.model_dump())


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
