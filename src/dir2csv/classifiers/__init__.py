"""Path classifiers that turn selected paths and a category pattern into CSV rows."""
