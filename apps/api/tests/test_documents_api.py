"""
Warranty document tests.

POST   /api/v1/warranties/{id}/documents/
DELETE /api/v1/warranties/{id}/documents/{document_id}/

Test coverage:
1. Upload stores the file and returns metadata
2. Size and MIME type limits
3. Only owner/admin may upload or remove
4. Deleting a document or its warranty removes the stored file
"""
import os

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.warranties.models import WarrantyDocument


def documents_url(warranty_id):
    return f'/api/v1/warranties/{warranty_id}/documents/'


def pdf_file(name='receipt.pdf', size=1024):
    return SimpleUploadedFile(name, b'%PDF-1.4\n' + b'0' * size, content_type='application/pdf')


def stored_path(document):
    return document.file.path


@pytest.mark.django_db
class TestDocumentUpload:

    def test_upload_pdf(self, user_client, warranty):
        response = user_client.post(
            documents_url(warranty.id), {'document': pdf_file()}, format='multipart'
        )

        assert response.status_code == 201
        assert response.data['name'] == 'receipt.pdf'
        assert response.data['content_type'] == 'application/pdf'
        assert response.data['path'].startswith('/media/warranty_documents/')

        document = WarrantyDocument.objects.get(pk=response.data['id'])
        assert document.warranty == warranty
        assert os.path.exists(stored_path(document))

    def test_upload_png(self, user_client, warranty):
        image = SimpleUploadedFile('photo.png', b'\x89PNG\r\n\x1a\n' + b'0' * 64, content_type='image/png')

        response = user_client.post(documents_url(warranty.id), {'document': image}, format='multipart')

        assert response.status_code == 201

    def test_documents_listed_on_warranty(self, user_client, warranty):
        user_client.post(documents_url(warranty.id), {'document': pdf_file('a.pdf')}, format='multipart')
        user_client.post(documents_url(warranty.id), {'document': pdf_file('b.pdf')}, format='multipart')

        response = user_client.get(f'/api/v1/warranties/{warranty.id}/')

        assert [d['name'] for d in response.data['documents']] == ['a.pdf', 'b.pdf']

    def test_rejects_disallowed_type(self, user_client, warranty):
        script = SimpleUploadedFile('run.sh', b'echo hi', content_type='application/x-sh')

        response = user_client.post(documents_url(warranty.id), {'document': script}, format='multipart')

        assert response.status_code == 400
        assert response.data['error_type'] == 'invalid_document'
        assert not WarrantyDocument.objects.exists()

    def test_rejects_oversized_file(self, user_client, warranty, settings):
        settings.UPLOAD_MAX_BYTES = 512

        response = user_client.post(
            documents_url(warranty.id), {'document': pdf_file(size=2048)}, format='multipart'
        )

        assert response.status_code == 400
        assert response.data['error_type'] == 'invalid_document'
        assert not WarrantyDocument.objects.exists()

    def test_missing_file_field(self, user_client, warranty):
        response = user_client.post(documents_url(warranty.id), {}, format='multipart')

        assert response.status_code == 400
        assert 'document' in response.data

    def test_other_user_cannot_upload(self, other_user_client, warranty):
        response = other_user_client.post(
            documents_url(warranty.id), {'document': pdf_file()}, format='multipart'
        )

        assert response.status_code == 403
        assert not WarrantyDocument.objects.exists()

    def test_admin_can_upload(self, admin_client, warranty):
        response = admin_client.post(
            documents_url(warranty.id), {'document': pdf_file()}, format='multipart'
        )

        assert response.status_code == 201


@pytest.mark.django_db
class TestDocumentDelete:

    def _upload(self, client, warranty):
        response = client.post(documents_url(warranty.id), {'document': pdf_file()}, format='multipart')
        return WarrantyDocument.objects.get(pk=response.data['id'])

    def test_delete_removes_file_and_record(self, user_client, warranty):
        document = self._upload(user_client, warranty)
        path = stored_path(document)

        response = user_client.delete(f'{documents_url(warranty.id)}{document.id}/')

        assert response.status_code == 204
        assert not WarrantyDocument.objects.filter(pk=document.pk).exists()
        assert not os.path.exists(path)

    def test_delete_with_missing_file(self, user_client, warranty):
        document = self._upload(user_client, warranty)
        os.remove(stored_path(document))

        response = user_client.delete(f'{documents_url(warranty.id)}{document.id}/')

        assert response.status_code == 204
        assert not WarrantyDocument.objects.filter(pk=document.pk).exists()

    def test_unknown_document_is_404(self, user_client, warranty):
        response = user_client.delete(
            f'{documents_url(warranty.id)}00000000-0000-0000-0000-000000000000/'
        )

        assert response.status_code == 404

    def test_other_user_cannot_delete(self, user_client, other_user_client, warranty):
        document = self._upload(user_client, warranty)

        response = other_user_client.delete(f'{documents_url(warranty.id)}{document.id}/')

        assert response.status_code == 403
        assert WarrantyDocument.objects.filter(pk=document.pk).exists()

    def test_deleting_warranty_removes_files(self, user_client, warranty):
        paths = [stored_path(self._upload(user_client, warranty)) for _ in range(2)]

        response = user_client.delete(f'/api/v1/warranties/{warranty.id}/')

        assert response.status_code == 204
        assert not WarrantyDocument.objects.exists()
        assert not any(os.path.exists(path) for path in paths)
