import logging, sys
from creational.config.logging_config import configure
from creational.core import CreationalDemoError
from creational.demos import device_demo, document_demo

log = logging.getLogger("creational")

def main():
    configure()
    try:
        device_demo.run()
        document_demo.run()
    except CreationalDemoError as e:
        log.error("demo aborted: %s", e, exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
