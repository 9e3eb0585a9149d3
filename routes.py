# ======================================
# Clinic APIs
# ======================================

from flask import Blueprint, jsonify, request

from repositories import RESOURCES

bp = Blueprint('clinic', __name__)


def write_response(result):
    if result.get('insertId'):
        return jsonify({'insertId': result['insertId'], 'message': 'Success'})
    return jsonify(result)


def request_body():
    # Missing or non-JSON bodies behave like an empty form
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def add_resource_routes(blueprint, singular, plural, repository):
    """Register create/list/update/delete for one resource."""

    def create():
        return write_response(repository.create(request_body()))

    def list_rows():
        return jsonify(repository.list())

    def update(ident):
        return write_response(repository.update(ident, request_body()))

    def delete(ident):
        return write_response(repository.delete(ident))

    blueprint.add_url_rule(f'/add-{singular}', f'create_{singular}', create, methods=['POST'])
    blueprint.add_url_rule(f'/{plural}', f'list_{plural}', list_rows, methods=['GET'])
    blueprint.add_url_rule(f'/{plural}/<ident>', f'update_{singular}', update, methods=['PUT'])
    blueprint.add_url_rule(f'/delete-{singular}/<ident>', f'delete_{singular}', delete, methods=['DELETE'])


for singular, plural, repository in RESOURCES:
    add_resource_routes(bp, singular, plural, repository)


@bp.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok', 'message': 'Server is running'})
