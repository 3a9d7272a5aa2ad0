"""Account routes: sign-up, sign-in, sign-out and current user."""

from flask import jsonify, session

from routes.helpers import get_container, get_json_body, session_payload
from use_cases import SignInInput, SignUpInput


def register_auth(app):
    """Register authentication routes."""

    @app.route("/api/auth/signup", methods=["POST"])
    def signup():
        data = get_json_body()
        output = get_container().sign_up.execute(
            SignUpInput(
                email=data.get("email"),
                password=data.get("password"),
                full_name=data.get("fullName", data.get("full_name")),
            )
        )
        session["access_token"] = output.session.access_token
        return jsonify(session_payload(output.session)), 201

    @app.route("/api/auth/signin", methods=["POST"])
    def signin():
        data = get_json_body()
        output = get_container().sign_in.execute(
            SignInInput(email=data.get("email"), password=data.get("password"))
        )
        session["access_token"] = output.session.access_token
        return jsonify(session_payload(output.session)), 200

    @app.route("/api/auth/signout", methods=["POST"])
    def signout():
        get_container().sign_out.execute()
        session.pop("access_token", None)
        return jsonify({"status": "signed_out"}), 200

    @app.route("/api/auth/me")
    def me():
        user = get_container().get_current_user.execute().user
        return jsonify({"user": user.to_dict()}), 200
