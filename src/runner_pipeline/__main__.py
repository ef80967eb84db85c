import sys

from runner_pipeline.presentation.cli import main

sys.exit(main())
