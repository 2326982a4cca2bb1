from flask import Flask

from .geolocation import GeoCache, GeolocationResolver
from .service import PricingOrchestrator


def create_app(config_object='config.DevConfig'):
    app = Flask(__name__, instance_relative_config=False)
    app.config.from_object(config_object)

    # Core modules log under the app logger ('geoprice.*'), so one level covers both
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    resolver = GeolocationResolver(
        lookup_url=app.config['GEOLOCATION_API_URL'],
        timeout=app.config['GEOLOCATION_TIMEOUT'],
        user_agent=app.config['GEOLOCATION_USER_AGENT'],
        cache=GeoCache(ttl=app.config['GEOLOCATION_CACHE_TTL']),
    )
    app.extensions['pricing'] = PricingOrchestrator(
        resolver=resolver,
        theme_color=app.config.get('GATEWAY_THEME_COLOR'),
    )
    app.logger.info('Pricing configured geo_url=%s timeout=%ss cache_ttl=%ss',
                    app.config['GEOLOCATION_API_URL'], app.config['GEOLOCATION_TIMEOUT'],
                    app.config['GEOLOCATION_CACHE_TTL'])

    # Register blueprints
    from .routes import payment_bp
    app.register_blueprint(payment_bp)

    return app
