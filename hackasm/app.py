# hackasm/app.py
import logging
import os

from flask import Flask, Response, request, jsonify
from flask_cors import CORS

from hackasm.hack_assembler import HackAssembler
from hackasm.hack_disassembler import HackDisassembler

#logging.basicConfig(level=logging.DEBUG) # Use DEBUG for development
logger = logging.getLogger(__name__)

CORS_ORIGIN = os.environ.get("HACKASM_CORS_ORIGIN", "http://localhost:3000")
PORT = int(os.environ.get("HACKASM_PORT", "5001"))
PROGRAMS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "programs")

app = Flask(__name__)
# Adjust CORS for your frontend origin if different
CORS(app, resources={r"/api/*": {"origins": CORS_ORIGIN}})


def _list_programs():
    return sorted(name for name in os.listdir(PROGRAMS_DIR) if name.endswith(".asm"))


@app.route('/')
def index():
    return "Hack Assembler Backend is running!"

@app.route('/api/ping', methods=['GET'])
def ping():
    logger.debug("Ping endpoint called")
    return jsonify({"message": "pong"})

# --- Assemble/Disassemble Endpoints ---
@app.route('/api/assemble', methods=['POST'])
def handle_assemble():
    try:
        data = request.get_json(silent=True)
        if not data or 'assembly' not in data:
            return jsonify({"errors": [{"message": "Missing 'assembly' key in request."}]}), 400
        if not isinstance(data['assembly'], str):
            return jsonify({"errors": [{"message": "'assembly' must be a string."}]}), 400
        assembly_code = data['assembly']
        logger.debug(f"Received assembly for assembly: {assembly_code[:100]}...")
        result = HackAssembler().assemble(assembly_code)
        if result['errors']:
            logger.warning(f"Assembly dropped instructions: {result['errors']}")
        else:
            logger.debug(f"Assembly successful. Code length: {len(result['machine_code'])}")
        return jsonify(result)
    except Exception as e:
        logger.error(f"Error during assembly: {e}", exc_info=True)
        return jsonify({"errors": [{"message": f"Internal server error during assembly: {e}"}]}), 500

@app.route('/api/disassemble', methods=['POST'])
def handle_disassemble():
    try:
        data = request.get_json(silent=True)
        if not data or 'machine_code' not in data or not isinstance(data['machine_code'], list):
            return jsonify({"errors": [{"message": "Missing/invalid 'machine_code' key (must be list of binary strings)."}]}), 400
        machine_code_lines = data['machine_code']
        logger.debug(f"Received machine code for disassembly: {machine_code_lines[:5]}")
        result = HackDisassembler().disassemble(machine_code_lines)
        return jsonify(result)
    except Exception as e:
        logger.error(f"Error during disassembly: {e}", exc_info=True)
        return jsonify({"errors": [{"message": f"Internal server error during disassembly: {e}"}]}), 500

# --- Export Endpoint ---
@app.route('/api/export/binary', methods=['POST'])
def handle_export_binary():
    """Assembles the posted program and returns the .hack file as a download."""
    try:
        data = request.get_json(silent=True)
        if not data or 'assembly' not in data:
            return jsonify({"errors": [{"message": "Missing 'assembly' key in request."}]}), 400
        if not isinstance(data['assembly'], str):
            return jsonify({"errors": [{"message": "'assembly' must be a string."}]}), 400
        result = HackAssembler().assemble(data['assembly'])
        hack_text = "".join(item["bin"] + "\n" for item in result["machine_code"])
        return Response(
            hack_text,
            mimetype="text/plain",
            headers={"Content-Disposition": "attachment; filename=program.hack"},
        )
    except Exception as e:
        logger.error(f"Error during binary export: {e}", exc_info=True)
        return jsonify({"errors": [{"message": f"Internal server error during export: {e}"}]}), 500

# --- Example Programs ---
@app.route('/api/examples', methods=['GET'])
def handle_get_examples():
    return jsonify({"examples": _list_programs()}), 200

@app.route('/api/examples/<filename>', methods=['GET'])
def handle_get_example_code(filename):
    if filename not in _list_programs():
        return jsonify({"error": f"Unknown example '{filename}'"}), 404
    with open(os.path.join(PROGRAMS_DIR, filename), 'r', encoding='ascii') as f:
        code = f.read()
    return jsonify({"filename": filename, "code": code})


if __name__ == '__main__':
    # Run with `python -m flask --app hackasm.app run --port 5001` from root directory
    app.run(debug=False, port=PORT)
