from flask import Blueprint, current_app, jsonify, request

from .currency import format_price
from .pricing import PLANS
from .service import RequestContext

payment_bp = Blueprint('payment', __name__, url_prefix='/api/payment')


def _orchestrator():
    return current_app.extensions['pricing']


@payment_bp.route('/pricing')
def pricing():
    ctx = RequestContext.from_flask(request)
    result = _orchestrator().resolve_pricing(ctx)
    current_app.logger.info('Pricing served country=%s currency=%s',
                            result.location.country_code, result.pricing.currency)
    return jsonify(result.to_dict())


@payment_bp.route('/pricing/compatible')
def compatible_pricing():
    ctx = RequestContext.from_flask(request)
    result = _orchestrator().resolve_compatible_pricing(ctx)
    current_app.logger.info('Compatible pricing served country=%s currency=%s fallback=%s original=%s',
                            result.location.country_code, result.pricing.currency,
                            result.fallback_used, result.original_currency)
    return jsonify(result.to_dict())


@payment_bp.route('/plans')
def plans():
    return jsonify({'success': True, 'plans': [plan.to_dict() for plan in PLANS.values()]})


@payment_bp.route('/international-config')
def international_config():
    return jsonify({'success': True, 'config': _orchestrator().international_config()})


@payment_bp.route('/format')
def format_preview():
    currency = (request.args.get('currency') or 'USD').upper().strip()
    try:
        amount = float(request.args.get('amount', ''))
    except ValueError:
        return jsonify({'success': False, 'error': 'amount must be a number'}), 400
    return jsonify({'success': True, 'currency': currency, 'formatted': format_price(amount, currency)})
