# storefront/main.py
import sys

import uvicorn

from storefront.api import create_app
from storefront.utils.settings import PORT, SERVICE_NAME


def main():
    # python -m storefront.main order
    service = sys.argv[1] if len(sys.argv) > 1 else SERVICE_NAME
    app = create_app(service)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
