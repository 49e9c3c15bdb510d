"""
Local development server for the review generation Cloud Function.

This file is ONLY for local testing and should NOT be deployed.
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent.parent.parent.absolute()
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, request

# Import the Cloud Function handler
from main import review_generation_handler

app = Flask(__name__)


@app.route('/', methods=['POST', 'OPTIONS'])
@app.route('/api/generate', methods=['POST', 'OPTIONS'])
def generate():
    """Generate reviews from a JSON summary."""
    return review_generation_handler(request)


@app.route('/api/generate-from-file', methods=['POST', 'OPTIONS'])
def generate_from_file():
    """Generate reviews from an uploaded PDF (multipart field ``file``)."""
    if request.method == 'POST' and 'file' not in request.files:
        return jsonify({"status": "error", "message": "`file` upload is required"}), 400
    return review_generation_handler(request)


@app.route('/api/health', methods=['GET'])
def health():
    return jsonify({"ok": True})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    print(f"Starting local server on http://localhost:{port}")
    print(f"Test with: curl -X POST http://localhost:{port}/api/generate -H 'Content-Type: application/json' "
          "-d '{\"summary\": \"와인 바\", \"n\": 5}'")
    print("")
    app.run(host='0.0.0.0', port=port, debug=True)
