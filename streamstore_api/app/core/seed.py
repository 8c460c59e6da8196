"""
Demo catalog inserted into an empty database.

Services and their products are seeded only when the ``services`` table
is empty; slides are seeded independently when ``slides`` is empty.
"""

import logging
import sqlite3

logger = logging.getLogger(__name__)


DEMO_SERVICES = [
    {
        "name": "Netflix",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/0/08/Netflix_2015_logo.svg",
        "products": [
            ("4K 30 Dias | 1 tela com PIN", 24.90, "Acesso premium 4K por 30 dias.", "Entrega imediata via WhatsApp.", "https://picsum.photos/seed/netflix1/400/300"),
            ("Somente pra TV 4K 30 Dias | 1 tela com PIN", 19.90, "Exclusivo para Smart TV.", "PIN de segurança incluso.", "https://picsum.photos/seed/netflix2/400/300"),
            ("4K 7 Dias Compartilhada [Promoção]", 8.90, "Acesso compartilhado por 7 dias.", "Preço promocional.", "https://picsum.photos/seed/netflix3/400/300"),
            ("4K 30 Dias Compartilhada", 13.90, "Acesso compartilhado por 30 dias.", "Melhor custo-benefício.", "https://picsum.photos/seed/netflix4/400/300"),
        ],
    },
    {
        "name": "Spotify",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/1/19/Spotify_logo_with_text.svg",
        "products": [
            ("Spotify Premium - Link 3 Meses", 20.90, "3 meses de Spotify Premium.", "Link de convite familiar.", "https://picsum.photos/seed/spotify/400/300"),
        ],
    },
    {
        "name": "Canva",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/0/0e/Canva_logo.svg",
        "products": [
            ("Canva Pro", 15.90, "Acesso total ao Canva Pro.", "Ativação no seu e-mail.", "https://picsum.photos/seed/canva/400/300"),
        ],
    },
    {
        "name": "Prime Video",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/1/11/Amazon_Prime_Video_logo.svg",
        "products": [
            ("Conta Completa", 12.90, "Acesso total ao Prime Video.", "30 dias de validade.", "https://picsum.photos/seed/prime/400/300"),
        ],
    },
    {
        "name": "Paramount+",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/a/a5/Paramount_Plus.svg",
        "products": [
            ("Conta Completa", 18.90, "Acesso total ao Paramount+.", "30 dias de validade.", "https://picsum.photos/seed/paramount/400/300"),
        ],
    },
    {
        "name": "CapCut",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/a/af/CapCut_logo.svg",
        "products": [
            ("CapCut Pro 7 Dias Privado", 7.90, "Acesso privado por 7 dias.", "Recursos Pro liberados.", "https://picsum.photos/seed/capcut1/400/300"),
            ("CapCut Pro 28 Dias Privado", 20.90, "Acesso privado por 28 dias.", "Melhor para editores.", "https://picsum.photos/seed/capcut2/400/300"),
        ],
    },
]

DEMO_SLIDES = [
    ("Melhor loja de streamings", "https://picsum.photos/seed/stream0/1200/600"),
    ("Promoções exclusivas", "https://picsum.photos/seed/stream1/1200/600"),
    ("Serviços digitais para você", "https://picsum.photos/seed/stream2/1200/600"),
]


def seed_catalog(cursor: sqlite3.Cursor) -> None:
    """Insert the demo services, products and slides into empty tables."""
    row = cursor.execute("SELECT COUNT(*) AS count FROM services").fetchone()
    if row["count"] == 0:
        for service in DEMO_SERVICES:
            cursor.execute(
                "INSERT INTO services (name, logo) VALUES (?, ?)",
                (service["name"], service["logo"]),
            )
            service_id = cursor.lastrowid
            cursor.executemany(
                """
                INSERT INTO products (service_id, name, price, description, observations, image)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [(service_id, *product) for product in service["products"]],
            )
        logger.info("Seeded %d demo services", len(DEMO_SERVICES))

    row = cursor.execute("SELECT COUNT(*) AS count FROM slides").fetchone()
    if row["count"] == 0:
        cursor.executemany(
            "INSERT INTO slides (message, image) VALUES (?, ?)", DEMO_SLIDES
        )
        logger.info("Seeded %d demo slides", len(DEMO_SLIDES))
