# File: flashcards_app/modules/importer/routes.py
from flask import current_app, jsonify

from flashcards_app.modules.study.interface import StudyInterface
from flashcards_app.modules.study.services import read_file_source

from . import blueprint


@blueprint.route('/import', methods=['GET'])
def import_csv():
    """
    Cards parsed from the configured CSV file as ``[{word, pinyin, translation}]``.
    A missing file answers an empty list, never an error status.
    """
    path = current_app.config['FLASHCARDS_CSV_PATH']
    cards = StudyInterface.parse_csv(read_file_source(path))
    current_app.logger.debug("Serving %d cards from %s", len(cards), path)
    return jsonify(StudyInterface.cards_to_import_payload(cards))
