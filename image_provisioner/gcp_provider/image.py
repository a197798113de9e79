from typing import Iterator, List, Optional

from google.cloud import compute_v1


def name_prefix_filter(prefix: str) -> Optional[str]:
    if not prefix:
        return None
    return f"name eq ^{prefix}.*"


def get_license_self_link(client: compute_v1.LicensesClient, project: str, license_name: str) -> str:
    license = client.get(project=project, license_=license_name)
    assert type(license.self_link) is str

    return license.self_link


def delete_image(client: compute_v1.ImagesClient, project: str, image_name: str) -> compute_v1.Operation:
    return client.delete_unary(project=project, image=image_name)


def insert_image(client: compute_v1.ImagesClient, project: str, image: compute_v1.Image) -> compute_v1.Operation:
    return client.insert_unary(project=project, image_resource=image)


def iter_image_pages(client: compute_v1.ImagesClient, project: str, filter: Optional[str] = None) -> Iterator[List[compute_v1.Image]]:
    request = compute_v1.ListImagesRequest(project=project)
    if filter:
        request.filter = filter

    for page in client.list(request=request).pages:
        yield list(page.items)
