# File: flashcards_app/modules/study/routes/api.py
from flask import Response, current_app, jsonify, request
from marshmallow import ValidationError as SchemaValidationError

from flashcards_app.core.error_handlers import ValidationError, success_response

from .. import blueprint
from ..schemas import (
    AddCardSchema,
    DatasetNameSchema,
    ImportRequestSchema,
    RemoteImportSchema,
)
from ..services import (
    DatabaseKeyValueStore,
    ImportPayload,
    PersistenceGateway,
    StudyController,
    read_upload,
    run_remote_import,
)


def _gateway() -> PersistenceGateway:
    return PersistenceGateway(DatabaseKeyValueStore())


def _controller() -> StudyController:
    return StudyController.load(_gateway())


def _load_body(schema):
    """Validate the JSON body against ``schema``; malformed bodies become a 400."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object.')
    try:
        return schema.load(data)
    except SchemaValidationError as exc:
        raise ValidationError('Invalid request data.', errors=exc.messages)


def _view_response(controller: StudyController, message: str = None, **extra):
    data = {'view': controller.view()}
    data.update(extra)
    return jsonify(success_response(data, message))


@blueprint.route('/api/state', methods=['GET'])
def api_get_state():
    """Current study screen."""
    return _view_response(_controller())


# --- Import / Export ---

@blueprint.route('/api/import/begin', methods=['POST'])
def api_begin_import():
    """Reserve a ticket for an import whose result is delivered later."""
    controller = _controller()
    ticket = controller.begin_import()
    return jsonify(success_response({'ticket': ticket}))


@blueprint.route('/api/import', methods=['POST'])
def api_import():
    """Replace the live cards with an uploaded file, CSV text or a card list."""
    controller = _controller()

    upload = request.files.get('file')
    if upload is not None:
        raw_ticket = request.form.get('ticket')
        try:
            ticket = int(raw_ticket) if raw_ticket not in (None, '') else None
        except ValueError:
            raise ValidationError('Invalid request data.', errors={'ticket': ['Not a valid integer.']})
        payload = ImportPayload(source='file', text=read_upload(upload))
    else:
        body = _load_body(ImportRequestSchema())
        ticket = body['ticket']
        if body['csv'] is not None:
            payload = ImportPayload(source='text', text=body['csv'])
        elif body['cards'] is not None:
            payload = ImportPayload(source='cards', cards=body['cards'])
        else:
            raise ValidationError('Provide a CSV file, "csv" text or a "cards" list.')

    applied = controller.import_payload(payload, ticket=ticket)
    return _view_response(controller, applied=applied)


@blueprint.route('/api/import/remote', methods=['POST'])
def api_import_remote():
    """Fetch cards over HTTP; a failed fetch leaves the session untouched."""
    body = _load_body(RemoteImportSchema())
    url = body['url'] or current_app.config['FLASHCARDS_IMPORT_URL']
    result = run_remote_import(
        _gateway(),
        url,
        timeout=current_app.config.get('IMPORT_FETCH_TIMEOUT', 10),
        ticket=body['ticket'],
    )
    return _view_response(
        result['controller'],
        applied=result['applied'],
        ticket=result['ticket'],
        card_count=result['card_count'],
    )


@blueprint.route('/api/export', methods=['GET'])
def api_export():
    """Download unknown then known cards as CSV."""
    controller = _controller()
    filename = current_app.config.get('EXPORT_FILENAME', 'updated_flashcards.csv')
    return Response(
        controller.export_csv(),
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )


# --- Cards ---

@blueprint.route('/api/cards', methods=['POST'])
def api_add_card():
    body = _load_body(AddCardSchema())
    controller = _controller()
    controller.add_card(body['word'], body['pinyin'], body['translation'])
    return _view_response(controller), 201


@blueprint.route('/api/cards/unknown/<int:index>/known', methods=['POST'])
def api_mark_known(index):
    controller = _controller()
    changed = controller.mark_known(index)
    return _view_response(controller, changed=changed)


@blueprint.route('/api/cards/unknown/<int:index>', methods=['DELETE'])
def api_delete_unknown(index):
    controller = _controller()
    changed = controller.delete_unknown(index)
    return _view_response(controller, changed=changed)


@blueprint.route('/api/cards/known/<int:index>/restore', methods=['POST'])
def api_restore(index):
    controller = _controller()
    changed = controller.restore(index)
    return _view_response(controller, changed=changed)


@blueprint.route('/api/cards/known/<int:index>', methods=['DELETE'])
def api_delete_known(index):
    controller = _controller()
    changed = controller.delete_known(index)
    return _view_response(controller, changed=changed)


@blueprint.route('/api/cards/shuffle', methods=['POST'])
def api_shuffle():
    controller = _controller()
    changed = controller.shuffle()
    return _view_response(controller, changed=changed)


# --- Cursor ---

@blueprint.route('/api/cursor/next', methods=['POST'])
def api_next_card():
    controller = _controller()
    controller.advance()
    return _view_response(controller)


@blueprint.route('/api/cursor/prev', methods=['POST'])
def api_prev_card():
    controller = _controller()
    controller.retreat()
    return _view_response(controller)


@blueprint.route('/api/stage/cycle', methods=['POST'])
def api_cycle_stage():
    controller = _controller()
    controller.cycle_stage()
    return _view_response(controller)


@blueprint.route('/api/direction/toggle', methods=['POST'])
def api_toggle_direction():
    controller = _controller()
    controller.toggle_direction()
    return _view_response(controller)


# --- Datasets ---

@blueprint.route('/api/datasets', methods=['GET'])
def api_list_datasets():
    controller = _controller()
    return jsonify(success_response({
        'datasets': controller.dataset_summaries(),
        'current_dataset_name': controller.state.current_dataset_name,
    }))


@blueprint.route('/api/datasets', methods=['POST'])
def api_create_dataset():
    body = _load_body(DatasetNameSchema())
    controller = _controller()
    dataset = controller.create_dataset(body['name'])
    return _view_response(controller, f"Dataset '{dataset.name}' created."), 201


@blueprint.route('/api/datasets/<path:name>/select', methods=['POST'])
def api_select_dataset(name):
    controller = _controller()
    controller.select_dataset(name)
    return _view_response(controller)


@blueprint.route('/api/datasets/<path:name>', methods=['DELETE'])
def api_delete_dataset(name):
    controller = _controller()
    removed = controller.delete_dataset(name)
    return _view_response(controller, removed=removed)
