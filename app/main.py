from dotenv import load_dotenv

from infrastructure.logging import get_module_logger
from server import server

load_dotenv()

logger = get_module_logger()

server_app = server.handler
app = server_app
