from .explorer import ExplorerClient
from .provider import ChainGateway

__all__ = ["ChainGateway", "ExplorerClient"]
