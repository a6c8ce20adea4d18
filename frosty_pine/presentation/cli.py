"""
Command line shell over the brand use cases.

    frosty-pine brands add --name "Acme"
    frosty-pine brands get [--id ID | --name NAME]
"""

import argparse
import asyncio
import dataclasses
import json
import sys
from typing import List, Optional, TextIO

from frosty_pine.application.use_cases.add_new_brand import AddNewBrandInteractor
from frosty_pine.application.use_cases.retrieve_all_brands import (
    RetrieveAllBrandsInteractor, RetrieveAllBrandsError
)
from frosty_pine.domain.models.configuration import AppConfiguration
from frosty_pine.infrastructure.configuration.manager import ConfigurationManager
from frosty_pine.infrastructure.error_handling.handler import ErrorHandler
from frosty_pine.infrastructure.logging.logger import LoggerFactory
from frosty_pine.infrastructure.storage.in_memory import InMemoryDataSource
from frosty_pine.infrastructure.storage.repositories import InMemoryBrandRepository
from frosty_pine.presentation.presenters import CliBrandPresenter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frosty-pine", description="Track purchases.")
    parser.add_argument("--config", help="Path to a JSON configuration file; defaults apply if it is missing")
    parser.add_argument("--log-level", help="Override the configured log level")

    services = parser.add_subparsers(dest="service", required=True)

    brands = services.add_parser("brands", help="Operates on brands")
    brand_commands = brands.add_subparsers(dest="command", required=True)

    add = brand_commands.add_parser("add", help="Add a new brand")
    add.add_argument("-n", "--name", required=True)

    get = brand_commands.add_parser("get", help="List brands, optionally filtered")
    selector = get.add_mutually_exclusive_group()
    selector.add_argument("-i", "--id")
    selector.add_argument("-n", "--name")

    return parser


class FrostyPineCli:
    """Wires the in-memory storage, use cases and presenter for one run."""

    def __init__(self, config: AppConfiguration, out: Optional[TextIO] = None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        self._initialize_components()

    @classmethod
    def from_arguments(cls, args: argparse.Namespace, out: Optional[TextIO] = None) -> 'FrostyPineCli':
        """Build the shell from parsed arguments, loading configuration if given.

        A one-shot run only reads the configuration: a missing file is not
        created and hot reload is not started.
        """
        if args.config:
            bootstrap_logger = LoggerFactory.create_logger("frosty_pine.config", args.log_level or "INFO")
            config = ConfigurationManager(
                args.config, bootstrap_logger, persist_defaults=False
            ).get_app_config()
        else:
            config = AppConfiguration()

        if args.log_level:
            config = dataclasses.replace(config, log_level=args.log_level.upper())

        return cls(config, out)

    def _initialize_components(self) -> None:
        self.logger = LoggerFactory.create_component_logger("cli", self.config)
        self.error_handler = ErrorHandler(self.logger)

        self.data_source = InMemoryDataSource.seeded_with_brand_names(self.config.seed_brands)
        self.brand_repository = InMemoryBrandRepository(self.data_source, self.logger)

        self.add_new_brand = AddNewBrandInteractor(
            self.brand_repository, CliBrandPresenter(self.error_handler), self.logger
        )
        self.retrieve_all_brands = RetrieveAllBrandsInteractor(self.brand_repository, self.logger)

    async def run(self, args: argparse.Namespace) -> int:
        """Dispatch a parsed command; returns the process exit code."""
        if args.service == "brands":
            if args.command == "add":
                return await self._add_brand(args.name)
            if args.command == "get":
                return await self._get_brands(args.id, args.name)

        print(f"Unsupported command: {args.service} {args.command}", file=self.out)
        return 2

    async def _add_brand(self, name: str) -> int:
        output = await self.add_new_brand.execute(name)
        print(output.text, file=self.out)
        return output.exit_code

    async def _get_brands(self, brand_id: Optional[str], name: Optional[str]) -> int:
        try:
            brands = await self.retrieve_all_brands.execute()
        except RetrieveAllBrandsError as e:
            print(await self.error_handler.handle_error(e, {'component': 'cli'}), file=self.out)
            return 1

        if brand_id is not None:
            brands = [brand for brand in brands if brand.id == brand_id]
        elif name is not None:
            brands = [brand for brand in brands if brand.name == name]

        brands.sort(key=lambda brand: (brand.name, brand.id))
        print(json.dumps([brand.to_dict() for brand in brands], ensure_ascii=False), file=self.out)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cli = FrostyPineCli.from_arguments(args)
    return asyncio.run(cli.run(args))


if __name__ == "__main__":
    sys.exit(main())
