import json

from requests.structures import CaseInsensitiveDict

from jenkinsfacade import Response


def build_response(status_code, json_body=None, text=None, headers=None):
    '''Response as returned by a transport.

    ``json_body`` is serialized, so ``None`` can't be expressed with it;
    use ``text='null'`` for a literal JSON null.
    '''
    if json_body is not None:
        text = json.dumps(json_body)
    body = text.encode('utf-8') if text is not None else b''
    return Response(status_code, CaseInsensitiveDict(headers or {}), body)
