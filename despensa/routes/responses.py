# despensa/routes/responses.py
from flask import request


def json_body():
    """Cuerpo JSON de la request ({} si no hay, es inválido o no es un objeto)."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def service_response(result, **extra):
    """
    Traduce el resultado de un servicio a respuesta JSON.
    {'ok': False, 'not_found': True} -> 404; otros errores -> 400.
    """
    if not result.get('ok'):
        status = 404 if result.get('not_found') else 400
        body = {"success": False, "error": result.get('error')}
        if result.get('confirm'):
            body["confirm"] = result['confirm']
        return body, status
    body = {k: v for k, v in result.items() if k not in ('ok', 'not_found')}
    body.update(extra)
    body["success"] = True
    return body
