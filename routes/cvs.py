"""Saved CV routes."""

from flask import jsonify, request

from models.value_objects import CVTemplateType, ExportFormat
from routes.helpers import field, get_container, get_json_body, require_user
from use_cases import CreateCVInput, CVIdInput, ExportCVInput, GetCVByIdInput, UpdateCVInput


def register_cvs(app):
    """Register CV management routes. All of them need a signed-in user."""

    @app.route("/api/cvs", methods=["GET"])
    def list_cvs():
        require_user()
        output = get_container().get_user_cvs.execute()
        return jsonify({"cvs": [cv.to_dict() for cv in output.cvs], "total": output.total}), 200

    @app.route("/api/cvs", methods=["POST"])
    def create_cv():
        require_user()
        data = get_json_body()
        template = field(data, "template")
        output = get_container().create_cv.execute(
            CreateCVInput(
                title=data.get("title"),
                cv_data=field(data, "cvData", "cv_data") or None,
                template=template or app.config.get("DEFAULT_TEMPLATE", CVTemplateType.MODERN.value),
            )
        )
        return jsonify({"cv": output.cv.to_dict()}), 201

    @app.route("/api/cvs/<cv_id>", methods=["GET"])
    def get_cv(cv_id):
        require_user()
        output = get_container().get_cv_by_id.execute(GetCVByIdInput(id=cv_id))
        return jsonify({"cv": output.cv.to_dict()}), 200

    @app.route("/api/cvs/<cv_id>", methods=["PATCH"])
    def update_cv(cv_id):
        require_user()
        data = get_json_body()
        output = get_container().update_cv.execute(
            UpdateCVInput(
                id=cv_id,
                title=field(data, "title"),
                cv_data=field(data, "cvData", "cv_data"),
                selected_template=field(data, "selectedTemplate", "selected_template"),
            )
        )
        return jsonify({"cv": output.cv.to_dict()}), 200

    @app.route("/api/cvs/<cv_id>", methods=["DELETE"])
    def delete_cv(cv_id):
        require_user()
        get_container().delete_cv.execute(CVIdInput(id=cv_id))
        return "", 204

    @app.route("/api/cvs/<cv_id>/duplicate", methods=["POST"])
    def duplicate_cv(cv_id):
        require_user()
        output = get_container().duplicate_cv.execute(CVIdInput(id=cv_id))
        return jsonify({"cv": output.cv.to_dict()}), 201

    @app.route("/api/cvs/<cv_id>/default", methods=["POST"])
    def set_default_cv(cv_id):
        require_user()
        get_container().set_default_cv.execute(CVIdInput(id=cv_id))
        return jsonify({"id": cv_id, "isDefault": True}), 200

    @app.route("/api/cvs/<cv_id>/export", methods=["GET"])
    def export_cv(cv_id):
        require_user()
        output = get_container().export_cv.execute(
            ExportCVInput(id=cv_id, format=request.args.get("format", ExportFormat.PDF.value))
        )
        payload = {"format": output.format.value, "cv": output.cv.to_dict()}
        return jsonify(payload), 200
