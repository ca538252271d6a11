def register_blueprints(app):
    from .health import health_bp
    from .weather import weather_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(weather_bp, url_prefix="/api")
