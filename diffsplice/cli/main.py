#!/usr/bin/env python3
"""
Interfaz CLI para diffsplice
Divide diffs de git, inspecciona hunks y genera parches por hunk o grupo de cambios
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from diffsplice.config.settings import settings
from diffsplice.core import (
    create_change_group_patch,
    create_hunk_patch,
    parse_diff,
    parse_diff_report,
    parse_hunks,
    require_file_diff,
    select_change_group,
    select_hunk,
)
from diffsplice.exceptions import DiffLookupError
from diffsplice.utils.render import render_file_diff

logger = logging.getLogger(__name__)


# Helper function for JSON serialization
def json_dumps(obj):
    return json.dumps(obj, ensure_ascii=False, indent=2)


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument('-f', '--file', dest='diff_file', help='Archivo con el diff (.diff/.patch)')
    src.add_argument('--stdin', action='store_true', help='Leer el diff desde STDIN')


class CLI:
    """Interfaz de línea de comandos principal"""

    def setup_parser(self) -> argparse.ArgumentParser:
        """Configura el parser de argumentos"""
        parser = argparse.ArgumentParser(
            prog='diffsplice',
            description="diffsplice - Parseo de diffs y reconstrucción de parches",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Ejemplos de uso:
  %(prog)s files -f cambios.diff
  %(prog)s hunks src/app.py -f cambios.diff
  %(prog)s group-patch src/app.py 0 1 -f cambios.diff | git apply --cached
  git diff | %(prog)s show src/app.py --stdin
            """
        )

        # Opción global de depuración
        parser.add_argument(
            '--debug', action='store_true', help='Activa logging de depuración'
        )

        subparsers = parser.add_subparsers(dest='command', help='Comandos disponibles')

        files_parser = subparsers.add_parser(
            'files', help='Lista los archivos contenidos en el diff'
        )
        _add_source_args(files_parser)
        files_parser.add_argument('--json', action='store_true', help='Salida JSON con path y parche')
        files_parser.add_argument('--report', action='store_true', help='Incluye fragmentos descartados')
        files_parser.add_argument(
            '--validate-counts', action='store_true',
            help='Compara los conteos declarados en @@ con las líneas reales'
        )

        hunks_parser = subparsers.add_parser(
            'hunks', help='Muestra los hunks y grupos de cambios de un archivo (JSON)'
        )
        hunks_parser.add_argument('path', help='Ruta del archivo dentro del diff')
        _add_source_args(hunks_parser)

        hp_parser = subparsers.add_parser(
            'hunk-patch', help='Genera un parche independiente para un hunk'
        )
        hp_parser.add_argument('path', help='Ruta del archivo dentro del diff')
        hp_parser.add_argument('hunk', type=int, help='Índice del hunk (desde 0)')
        _add_source_args(hp_parser)

        gp_parser = subparsers.add_parser(
            'group-patch', help='Genera un parche independiente para un grupo de cambios'
        )
        gp_parser.add_argument('path', help='Ruta del archivo dentro del diff')
        gp_parser.add_argument('hunk', type=int, help='Índice del hunk (desde 0)')
        gp_parser.add_argument('group', type=int, help='Índice del grupo dentro del hunk (desde 0)')
        _add_source_args(gp_parser)

        show_parser = subparsers.add_parser(
            'show', help='Renderiza los hunks de un archivo en la terminal'
        )
        show_parser.add_argument('path', help='Ruta del archivo dentro del diff')
        _add_source_args(show_parser)

        serve_parser = subparsers.add_parser(
            'serve', help='Inicia el servicio HTTP (FastAPI)'
        )
        serve_parser.add_argument('--host', default=settings.host, help='Host de escucha')
        serve_parser.add_argument('--port', type=int, default=settings.port, help='Puerto de escucha')

        return parser

    def _read_diff(self, args) -> str:
        if args.stdin:
            return sys.stdin.read()
        return Path(args.diff_file).read_text(encoding='utf-8')

    def _file_patch(self, args) -> str:
        return require_file_diff(parse_diff(self._read_diff(args)), args.path)

    def run_files(self, args):
        """Lista los archivos del diff."""
        diff_text = self._read_diff(args)
        if args.report or args.validate_counts:
            report = parse_diff_report(diff_text, validate_counts=args.validate_counts or None)
            files = report.files
        else:
            report = None
            files = parse_diff(diff_text)

        if args.json:
            payload = {"files": [{"path": f.path, "patch": f.patch} for f in files]}
            if report is not None:
                payload["skipped"] = [vars(s) for s in report.skipped]
                payload["count_mismatches"] = [vars(m) for m in report.count_mismatches]
            print(json_dumps(payload))
            return 0

        for f in files:
            print(f.path)
        if report is not None:
            for s in report.skipped:
                print(f"⚠️  Fragmento {s.index} descartado ({s.reason}): {s.first_line}")
            for m in report.count_mismatches:
                print(
                    f"⚠️  {m.path} hunk {m.hunk_index}: declarado -{m.declared_old_count} "
                    f"+{m.declared_new_count}, real -{m.actual_old_count} +{m.actual_new_count}"
                )
        return 0

    def run_hunks(self, args):
        """Imprime los hunks de un archivo en JSON."""
        hunks = parse_hunks(self._file_patch(args))
        out = []
        for h in hunks:
            data = h.to_dict()
            # content y lines duplican información; basta con el conteo
            data.pop('content')
            data.pop('lines')
            out.append(data)
        print(json_dumps({"path": args.path, "hunks": out}))
        return 0

    def run_hunk_patch(self, args):
        """Imprime el parche de un hunk."""
        patch = self._file_patch(args)
        hunk = select_hunk(parse_hunks(patch), args.hunk)
        text = create_hunk_patch(args.path, hunk, patch)
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return 0

    def run_group_patch(self, args):
        """Imprime el parche de un grupo de cambios."""
        patch = self._file_patch(args)
        hunk = select_hunk(parse_hunks(patch), args.hunk)
        group = select_change_group(hunk, args.group)
        sys.stdout.write(create_change_group_patch(args.path, hunk, group, patch))
        return 0

    def run_show(self, args):
        """Renderiza un archivo del diff con rich."""
        render_file_diff(self._file_patch(args))
        return 0

    def run_serve(self, args):
        """Levanta el servidor HTTP."""
        import uvicorn

        print(f"🚀 diffsplice escuchando en http://{args.host}:{args.port}")
        uvicorn.run("diffsplice.server:app", host=args.host, port=args.port)
        return 0

    def run(self, argv=None):
        """Ejecuta la interfaz CLI"""
        parser = self.setup_parser()
        args = parser.parse_args(argv)

        logging.basicConfig(
            level=logging.DEBUG if args.debug else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        if not args.command:
            parser.print_help()
            return 0

        # Mapear comandos a métodos
        command_map = {
            'files': self.run_files,
            'hunks': self.run_hunks,
            'hunk-patch': self.run_hunk_patch,
            'group-patch': self.run_group_patch,
            'show': self.run_show,
            'serve': self.run_serve,
        }

        command_func = command_map.get(args.command)
        if not command_func:
            print(f"❌ Comando desconocido: {args.command}")
            return 1
        try:
            return command_func(args)
        except DiffLookupError as e:
            print(f"❌ {e}")
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ No se pudo leer el diff: {e}")
            return 1


def main():
    """Función principal"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
