"""Static keyword tables used by the analyzer

Plain ordered mappings; iteration order is part of the output (tag order,
scoring order) so entries must not be reordered.
"""

# Inferred tags: a tag applies when any of its keywords occurs in content + title
TAG_KEYWORDS = {
    'api': ['api', 'endpoint', 'rest', 'graphql', 'webhook'],
    'database': ['database', 'sql', 'nosql', 'mongodb', 'postgres', 'mysql'],
    'deployment': ['deploy', 'deployment', 'ci/cd', 'docker', 'kubernetes'],
    'security': ['security', 'auth', 'authentication', 'authorization', 'ssl', 'tls'],
    'monitoring': ['monitor', 'logging', 'metrics', 'alerting', 'observability'],
    'testing': ['test', 'testing', 'unit test', 'integration test', 'qa'],
    'documentation': ['document', 'documentation', 'readme', 'guide', 'manual'],
    'maintenance': ['maintenance', 'update', 'patch', 'upgrade', 'migration'],
}

COMPLEXITY_INDICATORS = {
    'high': [
        'integration', 'architecture', 'migration', 'refactor', 'complex',
        'multiple systems', 'distributed', 'microservices', 'scalability'
    ],
    'medium': [
        'configuration', 'setup', 'implementation', 'development',
        'multiple steps', 'dependencies', 'coordination'
    ],
    'low': [
        'simple', 'basic', 'quick', 'straightforward', 'single step',
        'documentation', 'review', 'minor change'
    ],
}

# Bullet lines mentioning one of these are treated as requirements
REQUIREMENT_CONTEXT_WORDS = [
    'access', 'permission', 'install', 'configure', 'setup', 'account', 'credential'
]

# Workspace scan: a doc counts as a playbook when its name or content mentions one of these
PLAYBOOK_NAME_INDICATORS = ['playbook', 'guide', 'process', 'audit', 'implementation']
PLAYBOOK_CONTENT_INDICATORS = ['playbook', 'process', 'steps', 'checklist']

# Workspace scan summary: category -> (name keywords, name-or-content keywords)
SCAN_CATEGORIES = {
    'HubSpot/CRM': ([], ['hubspot']),
    'Custom Objects': (['custom', 'object'], []),
    'Audits': ([], ['audit']),
    'Implementation': ([], ['implementation']),
}
