# cli/commands - create / list 하위 명령
"""
명령 모듈

- create_service: rosa-services create service
- list_services: rosa-services list services
"""
