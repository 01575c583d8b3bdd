def test_serves_cards_from_configured_file(app, client, tmp_path):
    path = tmp_path / 'flashcards.csv'
    path.write_text("你好,nǐ hǎo,hello\n再见,,goodbye,true\n", encoding='utf-8')
    app.config['FLASHCARDS_CSV_PATH'] = str(path)

    response = client.get('/api/import')

    assert response.status_code == 200
    assert response.get_json() == [
        {'word': '你好', 'pinyin': 'nǐ hǎo', 'translation': 'hello'},
        {'word': '再见', 'pinyin': None, 'translation': 'goodbye'},
    ]


def test_missing_file_serves_empty_list(client):
    response = client.get('/api/import')

    assert response.status_code == 200
    assert response.get_json() == []


def test_malformed_rows_are_skipped(app, client, tmp_path):
    path = tmp_path / 'flashcards.csv'
    path.write_text('"broken"x,p,t\nok,,fine\n', encoding='utf-8')
    app.config['FLASHCARDS_CSV_PATH'] = str(path)

    assert client.get('/api/import').get_json() == [
        {'word': 'ok', 'pinyin': None, 'translation': 'fine'},
    ]


def test_cross_origin_requests_allowed(client):
    response = client.get('/api/import', headers={'Origin': 'http://localhost:3000'})

    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:3000')
