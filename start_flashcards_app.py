from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

from flashcards_app import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', '8080'))
    app.logger.info("Backend running on http://127.0.0.1:%s", port)
    app.run(host='127.0.0.1', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
