"""
In-memory client catalogue shared by the v1 and v2 client handlers.
Seeded at import; lost on restart.
"""

from typing import Dict, List, Optional

_CLIENTS: Dict[str, Dict[str, str]] = {
    "1": {"id": "1", "name": "Acme Corp", "email": "ops@acme.test"},
    "2": {"id": "2", "name": "Globex", "email": "it@globex.test"},
}


def list_clients() -> List[Dict[str, str]]:
    return [dict(client) for client in _CLIENTS.values()]


def get_client(client_id: str) -> Optional[Dict[str, str]]:
    client = _CLIENTS.get(client_id)
    return dict(client) if client else None


def add_client(name: str, email: str) -> Dict[str, str]:
    client_id = str(max((int(k) for k in _CLIENTS), default=0) + 1)
    _CLIENTS[client_id] = {"id": client_id, "name": name, "email": email}
    return dict(_CLIENTS[client_id])
