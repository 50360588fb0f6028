"""
FastAPI backend service for statement parsing.
"""
from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from clientbank import DocumentType, parse_document
from clientbank.core.loader import DEFAULT_ENCODING, ClientBankError

app = FastAPI(title="ClientBank Statement Parser", version="1.0.0")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],  # Vite and other dev servers
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "ClientBank Statement Parser API", "status": "healthy"}


@app.post("/parse")
async def parse_statement_file(file: UploadFile = File(...), encoding: str = DEFAULT_ENCODING):
    """
    Parse an uploaded exchange file and return its sections.

    Args:
        file: Uploaded 1CClientBankExchange file
        encoding: Source encoding of the file

    Returns:
        Parsed statement data as JSON
    """
    logger.info(f"Processing statement: {file.filename}")
    data = await file.read()

    try:
        result = parse_document(data, encoding)
    except ClientBankError as e:
        logger.error(f"Error loading statement: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error parsing statement: {e}")
        raise HTTPException(status_code=500, detail=f"Error parsing statement: {str(e)}")

    if not result.is_successful:
        logger.warning(f"Statement {file.filename} rejected: {result.state.value}")
        return JSONResponse(status_code=422, content={
            "success": False,
            "state": result.state.value,
            "line_number": result.line_number,
        })

    root = result.root
    documents = root.documents
    amounts = [d.get_amount_fixed() for d in documents]

    logger.info(f"Successfully parsed statement: {len(documents)} documents found")

    return JSONResponse(content={
        "success": True,
        "state": result.state.value,
        "line_number": result.line_number,
        "data": result.model_dump(mode="json"),
        "summary": {
            "format_version": root.get_format_version(),
            "account": root.get_account(),
            "sections_count": len(root.sections),
            "documents_count": len(documents),
            "total_amount_fixed": sum(a for a in amounts if a is not None),
        }
    })


@app.get("/document-types")
async def list_document_types():
    """List the document types a section can be classified as."""
    return JSONResponse(content={
        "success": True,
        "document_types": [t.value for t in DocumentType]
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
