from bookshelf_web.routing import RouteEntry, build_router, nest


async def health_check():
    return {'status': 'ok'}


def build_health_router():
    return nest('/health', build_router([RouteEntry('GET', '', health_check)]), tags=['health'])
