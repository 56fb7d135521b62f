#!/usr/bin/env python3
"""
Listar todas as pessoas ativas (data_exclusao nula), pagina por pagina.

Uso:
  python scripts/list_active_pessoas.py [--size 100] [--sort nome,asc] [--min-id 1000] [--verbose]

Somente leitura: nada e alterado no banco.
"""
from __future__ import annotations

import argparse
import sys

from pessoas.core.config import get_settings
from pessoas.core.errors import PessoaError
from pessoas.core.observability import setup_logging
from pessoas.services.pessoa_query_service import PessoaActiveQueryService


def iter_active(service: PessoaActiveQueryService, size: int, sort: str | None):
    page_number = 0
    while True:
        page = service.list_active(page_number, size, sort)
        yield page
        if page.last or page.is_empty:
            break
        page_number += 1


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Listar pessoas ativas")
    ap.add_argument("--size", type=int, default=100, help="Tamanho da pagina (default: 100)")
    ap.add_argument("--sort", help="Ordenacao, ex.: nome,asc (desempate sempre por id)")
    ap.add_argument("--min-id", type=int, default=None, help="Mostrar apenas IDs >= este valor")
    ap.add_argument("--verbose", action="store_true", help="Logs detalhados")
    args = ap.parse_args(argv)

    settings = get_settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level, settings.log_format)

    service = PessoaActiveQueryService()
    total = 0
    shown = 0
    for page in iter_active(service, args.size, args.sort):
        if args.verbose:
            print(f"Pagina {page.number + 1}/{max(page.total_pages, 1)}: {page.number_of_elements} pessoas")
        total = page.total_elements
        for pessoa in page:
            if args.min_id is not None and pessoa.id < args.min_id:
                continue
            shown += 1
            documento = pessoa.documento_formatado or "N/A"
            print(f"  ID: {pessoa.id} | {pessoa.nome or 'N/A'} | Doc: {documento}")

    print(f"Total de pessoas ativas: {total}")
    if args.min_id is not None:
        print(f"Pessoas com ID >= {args.min_id}: {shown}")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except PessoaError as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc.code}: {exc}\n")
        raise SystemExit(1)
