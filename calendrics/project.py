identity = 'calendrics'
name = 'calendrics'
abstract = 'Calendrical field rules and the merge engine resolving them into dates and times.'
icon = '📅'
study = 'calendrics'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
