"""AI assistance routes."""

from flask import jsonify

from routes.helpers import get_container, get_json_body, require_user
from use_cases import AnalyzeCVInput, ImproveTextInput, MatchJobInput, ParseCVTextInput


def register_ai(app):
    """Register AI routes. They need a signed-in user."""

    @app.route("/api/ai/analyze", methods=["POST"])
    def analyze_cv():
        require_user()
        data = get_json_body()
        output = get_container().analyze_cv.execute(AnalyzeCVInput(cv_data=data.get("cvData")))
        return jsonify({"score": output.score.to_dict()}), 200

    @app.route("/api/ai/parse", methods=["POST"])
    def parse_cv_text():
        require_user()
        data = get_json_body()
        output = get_container().parse_cv_text.execute(ParseCVTextInput(text=data.get("text")))
        return jsonify({"cvData": output.cv_data}), 200

    @app.route("/api/ai/match", methods=["POST"])
    def match_job():
        require_user()
        data = get_json_body()
        output = get_container().match_job.execute(
            MatchJobInput(cv_data=data.get("cvData"), job_description=data.get("jobDescription"))
        )
        return jsonify({"match": output.match.to_dict()}), 200

    @app.route("/api/ai/improve", methods=["POST"])
    def improve_text():
        require_user()
        data = get_json_body()
        output = get_container().improve_text.execute(
            ImproveTextInput(text=data.get("text"), context=data.get("context"))
        )
        return jsonify({"result": output.result.to_dict()}), 200
