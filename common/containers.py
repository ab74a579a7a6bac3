from dependency_injector import containers, providers

from capability_channel.in_memory_capability_channel import InMemoryCapabilityChannel
from capability_channel.json_rpc_capability_channel import JsonRpcCapabilityChannel
from common.utils import ROOT, configure_logging
from common.watcher_service.manager import CapabilityWatcherService


class WatcherServiceContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    logging = providers.Resource(
        configure_logging,
        log_dir=config.log_dir,
        level=config.log_level,
    )

    in_memory_capability_channel = providers.Singleton(InMemoryCapabilityChannel)

    json_rpc_capability_channel = providers.Singleton(JsonRpcCapabilityChannel)

    capability_channel = providers.Selector(
        config.channel.mode,
        memory=in_memory_capability_channel,
        stream=json_rpc_capability_channel,
    )

    # The service gets the provider itself and resolves the channel on each call
    watcher_service = providers.Singleton(
        CapabilityWatcherService,
        channel_provider=capability_channel.provider,
    )


def create_container() -> WatcherServiceContainer:
    container = WatcherServiceContainer()
    container.config.channel.mode.from_env("WATCHER_CHANNEL_MODE", default="memory")
    container.config.log_dir.from_env("WATCHER_LOG_DIR", default=str(ROOT / ".watcher"))
    container.config.log_level.from_env("WATCHER_LOG_LEVEL", default="DEBUG")
    return container


container = create_container()
