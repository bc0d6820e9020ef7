# typeahead/utils: logging, config and metrics helpers
