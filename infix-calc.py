#!/usr/bin/env python3

import os
import logging

from infixcalc import main

if __name__ == '__main__':
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    main()
