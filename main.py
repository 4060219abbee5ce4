import logging
import sys

import config
from todoist_retrieve_manager import TodoistRetrieveManager

logging.basicConfig(format='%(asctime)s - %(name)s - %(funcName)s - %(levelname)s - %(message)s', level=logging.DEBUG)
logging.getLogger('urllib3').setLevel(logging.INFO)

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('Usage: python main.py <block-uuid> [filter]')
        sys.exit(1)
    manager = TodoistRetrieveManager(config.load_settings())
    print('Retrieving tasks...')
    manager.retrieve_tasks(sys.argv[1], ' '.join(sys.argv[2:]) or None)
