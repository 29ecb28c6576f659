import json


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)
