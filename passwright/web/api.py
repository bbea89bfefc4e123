from flask import Flask, jsonify, request

from passwright.config import ConfigError, DEFAULT_POLICY
from passwright.evaluator import default_evaluator
from passwright.generator import generate

app = Flask(__name__)

# built once; the common-password set is read-only after load
evaluator = default_evaluator(policy=DEFAULT_POLICY)

@app.route('/')
def home():
    return jsonify({
        "message": "Passwright API is running"
    })

def _int_field(data, key, default=None, optional=False):
    value = data.get(key, default)
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer")
    return value

def _bool_field(data, key, default=True):
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false")
    return value

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    try:
        password = generate(
            length=_int_field(data, 'length', optional=True),
            use_upper=_bool_field(data, 'upper'),
            use_lower=_bool_field(data, 'lower'),
            use_digits=_bool_field(data, 'digits'),
            use_special=_bool_field(data, 'special'),
            min_upper=_int_field(data, 'min_upper', 1),
            min_lower=_int_field(data, 'min_lower', 1),
            min_digits=_int_field(data, 'min_digits', 1),
            min_special=_int_field(data, 'min_special', 1),
            policy=evaluator.policy,
        )
    except ConfigError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': password, 'length': len(password)})

@app.route('/validate', methods=['POST'])
def validate_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    try:
        check_common = _bool_field(data, 'check_common')
    except ConfigError as e:
        return jsonify({'error': str(e)}), 400
    result = evaluator.evaluate(password, check_common)
    verdict = result.pop('verdict')
    result['verdict'] = verdict.name
    result['label'] = verdict.label
    return jsonify(result)

if __name__ == "__main__":
    app.run(debug=True)
