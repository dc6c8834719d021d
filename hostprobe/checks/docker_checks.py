# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Docker image and container checks.

Checks: dockerimage, dockerimageregexp, dockerrunning, dockerrunningregexp,
dockerrunningapi.

"Image" checks look at pulled images and need an exact name (or regex
match).  "Running" checks look at running containers and accept the target
as a substring of the container's image, so ``redis`` matches
``library/redis:7``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING

from hostprobe.config.config import Config
from hostprobe.core.acquisition import DockerAPIProvider, DockerCLIProvider, ResourceStateProvider
from hostprobe.core.command_runner import make_command_runner
from hostprobe.core.models import Verdict
from hostprobe.core.tabular import re_in, str_contained_in, str_in

from ._helpers import parse_user_regex, render

if TYPE_CHECKING:
    from hostprobe.core.check_registry import CheckRegistry

logger = logging.getLogger(__name__)

IMAGE_NOT_FOUND = "Docker image was not found"
CONTAINER_NOT_RUNNING = "Docker container not running"

ApiProviderFactory = Callable[[str], ResourceStateProvider]


# ---------------------------------------------------------------------------
# Image checks
# ---------------------------------------------------------------------------


def docker_image(parameters: list[str], provider: DockerCLIProvider) -> Verdict:
    """Pass if the image named ``parameters[0]`` (e.g. ``user/image``) is pulled."""
    name = parameters[0]
    images = provider.list_images()
    return render(str_in(name, images), IMAGE_NOT_FOUND, name, images)


def docker_image_regexp(parameters: list[str], provider: DockerCLIProvider) -> Verdict:
    """Like :func:`docker_image`, with a regex instead of an exact name."""
    pattern = parse_user_regex(parameters[0])
    images = provider.list_images()
    return render(re_in(pattern, images), IMAGE_NOT_FOUND, pattern.pattern, images)


# ---------------------------------------------------------------------------
# Running container checks
# ---------------------------------------------------------------------------


def docker_running(parameters: list[str], provider: ResourceStateProvider) -> Verdict:
    """Pass if some running container's image contains ``parameters[0]``."""
    name = parameters[0]
    running = provider.list_running_identifiers()
    return render(str_contained_in(name, running), CONTAINER_NOT_RUNNING, name, running)


def docker_running_regexp(parameters: list[str], provider: ResourceStateProvider) -> Verdict:
    """Like :func:`docker_running`, with a regex instead of a substring."""
    pattern = parse_user_regex(parameters[0])
    running = provider.list_running_identifiers()
    return render(re_in(pattern, running), CONTAINER_NOT_RUNNING, pattern.pattern, running)


def docker_running_api(
    parameters: list[str],
    provider_factory: ApiProviderFactory,
    default_endpoint: str | None = None,
) -> Verdict:
    """Like :func:`docker_running`, reading state from the API at ``parameters[0]``.

    An empty endpoint parameter falls back to *default_endpoint*.
    """
    endpoint = parameters[0] or default_endpoint or ""
    provider = provider_factory(endpoint)
    return docker_running([parameters[1]], provider)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_docker_checks(
    registry: CheckRegistry,
    config: Config | None = None,
    cli_provider: DockerCLIProvider | None = None,
    api_provider_factory: ApiProviderFactory | None = None,
) -> None:
    """Register every Docker check on *registry*.

    Args:
        registry: Registry to populate
        config: Settings for the default providers; read from the
            environment when omitted
        cli_provider: Replaces the ``docker`` command line provider
        api_provider_factory: Builds an API provider from an endpoint string
    """
    config = config or Config.from_env()

    if cli_provider is None:
        cli_provider = DockerCLIProvider(
            runner=make_command_runner(config.command_timeout),
            docker_binary=config.docker_binary,
            case_sensitive_headers=config.case_sensitive_headers,
        )

    if api_provider_factory is None:

        def api_provider_factory(endpoint: str) -> ResourceStateProvider:
            return DockerAPIProvider(endpoint, timeout=config.api_timeout)

    registry.register("dockerimage", partial(docker_image, provider=cli_provider), 1)
    registry.register("dockerimageregexp", partial(docker_image_regexp, provider=cli_provider), 1)
    registry.register("dockerrunning", partial(docker_running, provider=cli_provider), 1)
    registry.register("dockerrunningregexp", partial(docker_running_regexp, provider=cli_provider), 1)
    registry.register(
        "dockerrunningapi",
        partial(
            docker_running_api,
            provider_factory=api_provider_factory,
            default_endpoint=config.docker_endpoint,
        ),
        2,
    )
    logger.debug("Registered Docker checks using %s", cli_provider.get_name())
