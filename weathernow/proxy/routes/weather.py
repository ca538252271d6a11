import logging

from flask import Blueprint, current_app, jsonify, request

from ..openweather import select_display_name, to_api_lang

logger = logging.getLogger(__name__)

weather_bp = Blueprint("weather", __name__)


@weather_bp.route("/weather")
def get_weather():
    """Current weather for ?city=<name>&lang=<ko|zh|en>, named in that language."""
    city = request.args.get("city")
    lang = request.args.get("lang") or "ko"

    if not city:
        return jsonify({"error": "Missing city parameter"}), 400

    client = current_app.extensions["openweather"]

    try:
        location = client.geocode(city)
        if location is None:
            return jsonify({"error": "City not found"}), 404

        response = client.current_weather(location["lat"], location["lon"], to_api_lang(lang))
        data = response.json()

        if response.is_error or str(data.get("cod")) != "200":
            logger.warning(f"Upstream weather failed for '{city}': HTTP {response.status_code} {data}")
            return jsonify(data), response.status_code

        data["name"] = select_display_name(location, lang)
        return jsonify(data)

    except Exception:
        logger.exception(f"Weather lookup failed for '{city}'")
        return jsonify({"error": "Internal server error"}), 500
